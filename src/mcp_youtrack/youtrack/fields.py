"""Custom field payload construction for YouTrack issue writes.

Callers pass custom field values without knowing the field's declared type,
so the `$type` of each payload entry is inferred from the value's shape.
When no kind can be inferred the entry is sent untagged and YouTrack falls
back to the field's own type.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..models.youtrack.values import (
    BoolValue,
    FieldValue,
    ListValue,
    NullValue,
    NumberValue,
    ReferenceValue,
    TextValue,
    parse_field_value,
)
from .constants import MULTI_ENUM_FIELD, SINGLE_ENUM_FIELD, SINGLE_USER_FIELD

logger = logging.getLogger("mcp-youtrack.fields")


def infer_field_value(value: FieldValue) -> tuple[FieldValue, str | None]:
    """
    Normalize a parsed value and pick its field kind tag.

    Args:
        value: The parsed custom field value

    Returns:
        Tuple of (normalized value, `$type` tag or None)
    """
    match value:
        case NullValue():
            return value, None
        case TextValue(text=text):
            return ReferenceValue({"name": text}), SINGLE_ENUM_FIELD
        case ReferenceValue() if value.has_any("login"):
            return value, SINGLE_USER_FIELD
        case ReferenceValue() if value.has_any("name", "id"):
            return value, SINGLE_ENUM_FIELD
        case ReferenceValue():
            return value, None
        case ListValue():
            # Lists are never user references; an empty list clears the field
            return value, MULTI_ENUM_FIELD
        case NumberValue() | BoolValue():
            return value, None


def infer_custom_field(raw: Any) -> tuple[Any, str | None]:
    """
    Normalize a caller-supplied custom field value and infer its `$type`.

    - None is sent as null, untagged.
    - A string becomes `{"name": <string>}` tagged as a single enum.
    - A mapping is sent as given: with a `login` key it is a single user,
      with `name` or `id` a single enum, otherwise untagged.
    - A list is sent as given, tagged as a multi enum.
    - Numbers and booleans are sent as given, untagged.

    Args:
        raw: The caller-supplied value

    Returns:
        Tuple of (JSON-ready value, `$type` tag or None)

    Raises:
        TypeError: If the value is not JSON-shaped
    """
    normalized, field_type = infer_field_value(parse_field_value(raw))
    return normalized.to_wire(), field_type


def build_custom_field(name: str, raw: Any) -> dict[str, Any]:
    """
    Build one entry of an issue's `customFields` payload.

    Args:
        name: The custom field name
        raw: The caller-supplied value

    Returns:
        Payload entry with `name`, optional `$type` and `value`
    """
    value, field_type = infer_custom_field(raw)
    entry: dict[str, Any] = {"name": name}
    if field_type:
        entry["$type"] = field_type
    entry["value"] = value
    logger.debug(f"Custom field '{name}' inferred as {field_type or 'untagged'}")
    return entry


def build_custom_fields(fields: Mapping[str, Any]) -> list[dict[str, Any]]:
    """
    Build the `customFields` payload for an issue create or update.

    Args:
        fields: Map of custom field name to caller-supplied value

    Returns:
        Payload entries in the order of the input mapping
    """
    return [build_custom_field(name, raw) for name, raw in fields.items()]


def tag_refs_payload(tags: list[str]) -> list[dict[str, str]]:
    """Encode tag names as tag references."""
    return [{"name": tag} for tag in tags]
