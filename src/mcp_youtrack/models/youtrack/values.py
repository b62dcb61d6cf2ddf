"""
Closed union of custom field value shapes.

YouTrack custom field values have no fixed schema: the same field may carry
a string, a reference object, a list of references or a bare scalar. Raw
values are parsed once into one of the variants below, and everything that
needs to look at a value's shape matches over the union instead of probing
the raw object.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Preference order used when a reference is reduced to one display value
FLATTEN_KEYS: tuple[str, ...] = ("name", "login", "fullName", "idReadable")


@dataclass(frozen=True)
class NullValue:
    """An explicitly empty value."""

    def to_wire(self) -> None:
        return None


@dataclass(frozen=True)
class TextValue:
    """A plain string."""

    text: str

    def to_wire(self) -> str:
        return self.text


@dataclass(frozen=True)
class ReferenceValue:
    """A key/value mapping such as `{"name": "High"}` or `{"login": "jdoe"}`."""

    data: Mapping[str, Any]

    def has_any(self, *keys: str) -> bool:
        return any(key in self.data for key in keys)

    def to_wire(self) -> dict[str, Any]:
        return dict(self.data)


@dataclass(frozen=True)
class ListValue:
    """An ordered list of values."""

    items: tuple["FieldValue", ...]

    def to_wire(self) -> list[Any]:
        return [item.to_wire() for item in self.items]


@dataclass(frozen=True)
class NumberValue:
    """An int or float."""

    number: int | float

    def to_wire(self) -> int | float:
        return self.number


@dataclass(frozen=True)
class BoolValue:
    """A boolean."""

    flag: bool

    def to_wire(self) -> bool:
        return self.flag


FieldValue: TypeAlias = (
    NullValue | TextValue | ReferenceValue | ListValue | NumberValue | BoolValue
)


def parse_field_value(raw: Any) -> FieldValue:
    """
    Parse a raw value into the field value union.

    Args:
        raw: A caller-supplied value or a value decoded from JSON

    Returns:
        The matching FieldValue variant

    Raises:
        TypeError: If the value is not JSON-shaped
    """
    # bool before int: bool is a subclass of int
    if raw is None:
        return NullValue()
    if isinstance(raw, bool):
        return BoolValue(raw)
    if isinstance(raw, int | float):
        return NumberValue(raw)
    if isinstance(raw, str):
        return TextValue(raw)
    if isinstance(raw, Mapping):
        return ReferenceValue(dict(raw))
    if isinstance(raw, list | tuple):
        return ListValue(tuple(parse_field_value(item) for item in raw))
    raise TypeError(f"Unsupported custom field value type: {type(raw).__name__}")


def flatten_field_value(value: FieldValue) -> Any:
    """
    Reduce a value to its human-readable representative.

    A reference yields its `name`, else `login`, else `fullName`, else
    `idReadable`, else the whole mapping. Lists are flattened element-wise.
    Scalars are returned unchanged.

    Args:
        value: The parsed value

    Returns:
        The flattened value
    """
    match value:
        case ReferenceValue(data=data):
            for key in FLATTEN_KEYS:
                if data.get(key) is not None:
                    return data[key]
            return dict(data)
        case ListValue(items=items):
            return [flatten_field_value(item) for item in items]
        case NullValue() | TextValue() | NumberValue() | BoolValue():
            return value.to_wire()
