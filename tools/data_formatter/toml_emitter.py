"""
TOML emission.

Objects become tables. A member is emitted inline as ``key = value`` unless
it "nests": an object with several members (or a single member that nests
itself) becomes a ``[table]`` section, and a non-empty array made only of
objects becomes an array of tables with ``[[name]]`` headers. Chains of
single-member objects collapse into dotted keys, so ``{"a": {"b": 1}}`` is
written ``a.b = 1`` rather than getting a header of its own.

TOML has no null: null members and elements are dropped before any of these
decisions are made.
"""

from typing import Any, Dict, List, Tuple

from .highlight import Role, Span
from .model import (
    ConversionFormat,
    UnsupportedValueError,
    ValueKind,
    array_elements,
    is_container,
    kind_of,
    object_members,
)
from .strings import scalar_text, toml_key, toml_string

NULL_ERROR = "cannot represent null in TOML"


def should_nest(value: Any) -> bool:
    """Check whether a member becomes a section instead of a ``key = value`` line."""
    kind = kind_of(value)
    if kind == ValueKind.OBJECT:
        members = object_members(value)
        return len(members) > 1 or (len(members) == 1 and should_nest(members[0][1]))
    if kind == ValueKind.ARRAY:
        elements = array_elements(value)
        return bool(elements) and all(kind_of(e) == ValueKind.OBJECT for e in elements)
    return False


def dotted_key(key: str, value: Any) -> Tuple[str, Any]:
    """Collapse a chain of single-member objects into a dotted key."""
    key = toml_key(key)
    if kind_of(value) == ValueKind.OBJECT:
        members = object_members(value)
        if len(members) == 1:
            inner_key, inner_value = dotted_key(*members[0])
            return f"{key}.{inner_key}", inner_value
    return key, value


def _inline_spans(value: Any) -> List[Span]:
    kind = kind_of(value)

    if kind == ValueKind.ARRAY:
        spans = [Span("[")]
        for i, element in enumerate(array_elements(value)):
            if i:
                spans.append(Span(", "))
            spans.extend(_inline_spans(element))
        spans.append(Span("]"))
        return spans

    if kind == ValueKind.OBJECT:
        members = object_members(value)
        if not members:
            return [Span("{}")]
        spans = [Span("{ ")]
        for i, (key, member) in enumerate(members):
            if i:
                spans.append(Span(", "))
            spans.append(Span(toml_key(key), Role.KEY))
            spans.append(Span(" = "))
            spans.extend(_inline_spans(member))
        spans.append(Span(" }"))
        return spans

    return _scalar_spans(value)


def _scalar_spans(value: Any) -> List[Span]:
    kind = kind_of(value)
    if kind == ValueKind.NULL:
        raise UnsupportedValueError(NULL_ERROR)
    if kind == ValueKind.STRING:
        return [Span(toml_string(value), Role.STRING)]
    return [Span(scalar_text(value, ConversionFormat.TOML))]


def _table_spans(table: Dict[str, Any], context: str) -> List[Span]:
    """Emit the body of a table whose full dotted name is ``context`` minus the dot."""
    members = object_members(table)
    flat = [(key, value) for key, value in members if not should_nest(value)]
    nested = [(key, value) for key, value in members if should_nest(value)]
    spans: List[Span] = []

    for i, (key, value) in enumerate(flat):
        if i:
            spans.append(Span("\n"))
        key, value = dotted_key(key, value)
        spans.append(Span(key, Role.KEY))
        spans.append(Span(" = "))
        spans.extend(_inline_spans(value))

    for i, (key, value) in enumerate(nested):
        name = context + toml_key(key)
        if flat or i:
            spans.append(Span("\n\n"))

        if kind_of(value) == ValueKind.OBJECT:
            # A table whose members all nest is defined by its sub-tables
            if any(not should_nest(member) for _, member in object_members(value)):
                spans.append(Span(f"[{name}]", Role.HEADER))
                spans.append(Span("\n"))
            spans.extend(_table_spans(value, name + "."))
            continue

        for j, element in enumerate(array_elements(value)):
            if j:
                spans.append(Span("\n\n"))
            spans.append(Span(f"[[{name}]]", Role.HEADER))
            if object_members(element):
                spans.append(Span("\n"))
            spans.extend(_table_spans(element, name + "."))

    return spans


def _check_representable(value: Any) -> None:
    if value is None:
        raise UnsupportedValueError(NULL_ERROR)
    if is_container(value) and value:
        remaining = object_members(value) if isinstance(value, dict) else array_elements(value)
        if not remaining:
            raise UnsupportedValueError(NULL_ERROR)


def emit_toml(value: Any) -> List[Span]:
    """
    Emit a value as a TOML document.

    An object becomes a document of tables; arrays and scalars are written
    inline.

    Args:
        value: Value tree

    Returns:
        Spans of the document, ending with a single newline

    Raises:
        UnsupportedValueError: If the value is null, or a container holding
            nothing but nulls
    """
    _check_representable(value)
    if kind_of(value) == ValueKind.OBJECT:
        spans = _table_spans(value, "")
    else:
        spans = _inline_spans(value)
    return spans + [Span("\n")]
