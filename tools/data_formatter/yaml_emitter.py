"""Block-style YAML."""

from typing import Any, List

from .highlight import Role, Span
from .model import ConversionFormat, ValueKind, kind_of
from .strings import TAB_WIDTH, StringRole, render_string, scalar_text, yaml_flow_string


def _yaml_spans(value: Any, depth: int, is_value: bool) -> List[Span]:
    """
    Emit one node.

    ``is_value`` is set when the node is the value of a mapping entry: the
    caller has just written ``key:``, so scalars need a leading space and
    block collections must start on the next line.
    """
    kind = kind_of(value)
    newline = Span("\n" + " " * (depth * TAB_WIDTH))
    spans: List[Span] = []

    if kind == ValueKind.ARRAY:
        if not value:
            return [Span(" []" if is_value else "[]")]
        for i, element in enumerate(value):
            if i > 0 or is_value:
                spans.append(newline)
            spans.append(Span("- "))
            spans.extend(_yaml_spans(element, depth + 1, False))
        return spans

    if kind == ValueKind.OBJECT:
        if not value:
            return [Span(" {}" if is_value else "{}")]
        for i, (key, member) in enumerate(value.items()):
            if i > 0 or is_value:
                spans.append(newline)
            spans.append(Span(yaml_flow_string(key), Role.KEY))
            spans.append(Span(":"))
            spans.extend(_yaml_spans(member, depth + 1, True))
        return spans

    if kind == ValueKind.STRING:
        rendered = render_string(value, StringRole.SCALAR, ConversionFormat.YAML, depth)
        if is_value and rendered.needs_separator:
            spans.append(Span(" "))
        spans.append(Span(rendered.text, Role.STRING))
        return spans

    if is_value:
        spans.append(Span(" "))
    spans.append(Span(scalar_text(value, ConversionFormat.YAML)))
    return spans


def emit_yaml(value: Any) -> List[Span]:
    """
    Emit a value as a block-style YAML document.

    Args:
        value: Value tree

    Returns:
        Spans of the document, ending with a single newline
    """
    return _yaml_spans(value, 0, False) + [Span("\n")]
