"""Data Formatter - Print JSON, YAML, TOML and CSV data as idiomatic JSON, YAML or TOML."""

from .converter import DataConverter, InputFormat
from .highlight import Palette, Role, Span, StyledSink, to_text
from .json_emitter import emit_json
from .model import ConversionFormat, UnsupportedValueError
from .toml_emitter import emit_toml
from .yaml_emitter import emit_yaml

__all__ = [
    "ConversionFormat",
    "DataConverter",
    "InputFormat",
    "Palette",
    "Role",
    "Span",
    "StyledSink",
    "UnsupportedValueError",
    "emit_json",
    "emit_toml",
    "emit_yaml",
    "to_text",
]
