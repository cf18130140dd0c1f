"""Canonical indented JSON."""

from typing import Any, List

from .highlight import Role, Span
from .model import ConversionFormat, ValueKind, kind_of
from .strings import TAB_WIDTH, quote, scalar_text


def _indent(depth: int) -> Span:
    return Span("\n" + " " * (depth * TAB_WIDTH))


def _json_spans(value: Any, depth: int) -> List[Span]:
    kind = kind_of(value)

    if kind == ValueKind.ARRAY:
        if not value:
            return [Span("[]")]
        spans = [Span("[")]
        for i, element in enumerate(value):
            spans.append(_indent(depth + 1))
            spans.extend(_json_spans(element, depth + 1))
            spans.append(Span(",") if i < len(value) - 1 else _indent(depth))
        spans.append(Span("]"))
        return spans

    if kind == ValueKind.OBJECT:
        if not value:
            return [Span("{}")]
        spans = [Span("{")]
        for i, (key, member) in enumerate(value.items()):
            spans.append(_indent(depth + 1))
            spans.append(Span(quote(key), Role.KEY))
            spans.append(Span(": "))
            spans.extend(_json_spans(member, depth + 1))
            spans.append(Span(",") if i < len(value) - 1 else _indent(depth))
        spans.append(Span("}"))
        return spans

    if kind == ValueKind.STRING:
        return [Span(quote(value), Role.STRING)]

    return [Span(scalar_text(value, ConversionFormat.JSON))]


def emit_json(value: Any) -> List[Span]:
    """
    Emit a value as pretty-printed JSON.

    Non-empty arrays and objects are expanded one entry per line with a
    two-space indent; empty ones stay inline.

    Args:
        value: Value tree

    Returns:
        Spans of the document, ending with a single newline
    """
    return _json_spans(value, 0) + [Span("\n")]
