"""
Quoting and escaping rules for keys and scalars.

Each target format has its own idea of when a string can be written bare.
The helpers here return the exact text to emit, already quoted, escaped or
laid out as a block, so the emitters never deal with escaping themselves.
"""

import math
import string
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from .model import ConversionFormat, ValueKind, kind_of

TAB_WIDTH = 2

LINE_SEPARATORS = "\u2028\u2029"

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# C0, DEL and C1 controls plus the Unicode line separators
_ESCAPE_TABLE = str.maketrans(
    {
        **{chr(code): f"\\u{code:04x}" for code in range(0x20)},
        **{chr(code): f"\\u{code:04x}" for code in range(0x7F, 0xA0)},
        **{char: f"\\u{ord(char):04x}" for char in LINE_SEPARATORS},
        **_SHORT_ESCAPES,
    }
)

_TOML_BARE_KEY_CHARS = frozenset(string.ascii_letters + string.digits + "_-")

_YAML_INDICATORS = "-?:,[]{}#&*!|>'\"%@`"
_YAML_NUMBER_START = "+-." + string.digits
# Plain scalars a YAML 1.1 or 1.2 loader would not read back as strings,
# including the value and merge keys
_YAML_RESERVED = frozenset({"null", "~", "true", "false", "yes", "no", "on", "off", "=", "<<"})


class StringRole(str, Enum):
    """Where a string appears in the output."""

    KEY = "key"
    SCALAR = "scalar"


@dataclass(frozen=True)
class RenderedString:
    """A string ready to emit."""

    text: str
    # True when the text is a YAML mapping value and needs a space after ":"
    needs_separator: bool = False


def is_control(char: str) -> bool:
    """Check whether a character is a control character (category Cc)."""
    return unicodedata.category(char) == "Cc"


def _has_control_besides_newline(value: str) -> bool:
    return any((is_control(c) and c != "\n") or c in LINE_SEPARATORS for c in value)


def quote(value: str) -> str:
    """Quote a string the way JSON does, escaping every control character."""
    return '"' + value.translate(_ESCAPE_TABLE) + '"'


def toml_key(value: str) -> str:
    """Render a TOML key, bare when possible."""
    if value and all(c in _TOML_BARE_KEY_CHARS for c in value):
        return value
    return quote(value)


def toml_string(value: str) -> str:
    """Render a TOML string scalar, as a multi-line literal when possible."""
    if "\n" in value and not _has_control_besides_newline(value) and "'''" not in value:
        # A newline right after the opening delimiter is trimmed by parsers
        return "'''\n" + value + "'''"
    return quote(value)


def yaml_needs_quotes(value: str) -> bool:
    """Check whether a YAML plain scalar would be misread or invalid."""
    if not value:
        return True
    first = value[0]
    return (
        first.isspace()
        or value[-1].isspace()
        or first in _YAML_INDICATORS
        or first in _YAML_NUMBER_START
        or value.lower() in _YAML_RESERVED
        or any(is_control(c) or c in LINE_SEPARATORS for c in value)
        or ": " in value
        or " #" in value
        or value.endswith(":")
    )


def yaml_flow_string(value: str) -> str:
    """Render a YAML flow scalar or key."""
    return quote(value) if yaml_needs_quotes(value) else value


def yaml_block_string(value: str, depth: int) -> str:
    """
    Render a YAML literal block scalar.

    The header carries an indentation indicator when the first line starts
    with whitespace, and a chomping indicator unless the text ends with
    exactly one newline. Body lines are indented to ``depth``; a top-level
    block is indented one level since a block body cannot sit at column 0.
    """
    header = "|"
    if value[0].isspace():
        header += str(TAB_WIDTH)

    body = value.rstrip("\n")
    trailing = len(value) - len(body)
    if trailing == 0:
        header += "-"
    elif trailing > 1:
        header += "+"

    lines: List[str] = body.split("\n") + [""] * (trailing - 1)
    indent = " " * (max(depth, 1) * TAB_WIDTH)
    return header + "".join("\n" + (indent + line if line else "") for line in lines)


def yaml_string(value: str, depth: int) -> str:
    """Render a YAML string scalar, preferring a literal block."""
    if "\n" in value and value.strip("\n") and not _has_control_besides_newline(value):
        return yaml_block_string(value, depth)
    return yaml_flow_string(value)


def render_string(
    value: str,
    role: StringRole,
    fmt: ConversionFormat,
    depth: int = 0,
) -> RenderedString:
    """
    Render a string as a key or scalar for a target format.

    Args:
        value: The raw string
        role: Whether the string is a key or a scalar
        fmt: Target format
        depth: Nesting depth, used for YAML block scalars

    Returns:
        RenderedString with the text to emit
    """
    if fmt == ConversionFormat.TOML:
        text = toml_key(value) if role == StringRole.KEY else toml_string(value)
        return RenderedString(text)

    if fmt == ConversionFormat.YAML:
        if role == StringRole.KEY:
            return RenderedString(yaml_flow_string(value))
        return RenderedString(yaml_string(value, depth), needs_separator=True)

    return RenderedString(quote(value))


_NON_FINITE = {
    ConversionFormat.JSON: ("NaN", "Infinity"),
    ConversionFormat.YAML: (".nan", ".inf"),
    ConversionFormat.TOML: ("nan", "inf"),
}


def format_float(value: float, fmt: ConversionFormat) -> str:
    """Render a float so that it reads back as a float in the target format."""
    if math.isnan(value):
        return _NON_FINITE[fmt][0]
    if math.isinf(value):
        infinity = _NON_FINITE[fmt][1]
        return infinity if value > 0 else "-" + infinity

    text = repr(value)
    mantissa, exp, exponent = text.partition("e")
    if exp and "." not in mantissa:
        # YAML 1.1 loaders only resolve floats that contain a dot
        text = f"{mantissa}.0e{exponent}"
    return text


def scalar_text(value: Any, fmt: ConversionFormat) -> str:
    """Render a null, bool or number in its default textual form."""
    kind = kind_of(value)
    if kind == ValueKind.NULL:
        return "null"
    if kind == ValueKind.BOOL:
        return "true" if value else "false"
    if kind == ValueKind.NUMBER:
        if isinstance(value, float):
            return format_float(value, fmt)
        return str(value)
    raise TypeError(f"Not a null, bool or number: {kind.value}")
