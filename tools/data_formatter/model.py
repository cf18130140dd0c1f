"""Value model shared by every emitter."""

from enum import Enum
from typing import Any, Dict, List, Tuple, Union

# A JSON-like tree: None, bool, int, float, str, list and dict with str keys.
# Insertion order of dicts is significant and preserved by every emitter.
JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


class ConversionFormat(str, Enum):
    """Supported output formats."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"


class ValueKind(str, Enum):
    """Cases of the value model."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class UnsupportedValueError(ValueError):
    """Raised when a value cannot be represented in the target format."""


def kind_of(value: Any) -> ValueKind:
    """
    Classify a value.

    Args:
        value: Node of a value tree

    Returns:
        The ValueKind of the node

    Raises:
        TypeError: If the value is not part of the value model
    """
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def is_container(value: Any) -> bool:
    """Check whether a value is an array or an object."""
    return kind_of(value) in (ValueKind.ARRAY, ValueKind.OBJECT)


def object_members(obj: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """Return the non-null members of an object, in order."""
    return [(key, value) for key, value in obj.items() if value is not None]


def array_elements(arr: List[Any]) -> List[Any]:
    """Return the non-null elements of an array, in order."""
    return [value for value in arr if value is not None]
