"""
YouTrack custom field schema models.

Project custom field entries come in two shapes depending on the endpoint:
the field's identity either sits in a nested `field` sub-object, or its keys
sit at the top level of the entry. Either shape may additionally be wrapped
in a `projectCustomField` object. Both shapes have their own parser and the
results are merged into a single schema model.
"""

import logging
from typing import Any, NamedTuple

from pydantic import Field

from ..base import ApiModel
from .common import color_background, optional_str

logger = logging.getLogger(__name__)


class FieldIdentity(NamedTuple):
    """Name and wire type id of a custom field."""

    name: str | None = None
    type: str | None = None


def _field_type_id(data: dict[str, Any]) -> str | None:
    field_type = data.get("fieldType")
    return optional_str(field_type, "id") if isinstance(field_type, dict) else None


def unwrap_project_custom_field(data: dict[str, Any]) -> dict[str, Any]:
    """Return the `projectCustomField` block when present, else the entry itself."""
    block = data.get("projectCustomField")
    return block if isinstance(block, dict) else data


def parse_nested_field_identity(block: dict[str, Any]) -> FieldIdentity:
    """Read name and type from the nested `field` sub-object."""
    field = block.get("field")
    if not isinstance(field, dict):
        return FieldIdentity()
    return FieldIdentity(name=optional_str(field, "name"), type=_field_type_id(field))


def parse_flat_field_identity(block: dict[str, Any]) -> FieldIdentity:
    """Read name and type from the top-level keys of the entry."""
    return FieldIdentity(name=optional_str(block, "name"), type=_field_type_id(block))


def merge_field_identity(nested: FieldIdentity, flat: FieldIdentity) -> FieldIdentity:
    """Prefer the nested identity and fill its gaps from the flat one."""
    return FieldIdentity(
        name=nested.name if nested.name is not None else flat.name,
        type=nested.type if nested.type is not None else flat.type,
    )


class YouTrackCustomFieldOption(ApiModel):
    """
    Model representing one allowed value of an enumerated custom field.
    """

    id: str | None = None
    name: str | None = None
    color: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackCustomFieldOption":
        """
        Create a YouTrackCustomFieldOption from a bundle value.

        Args:
            data: The bundle value from the YouTrack API

        Returns:
            A YouTrackCustomFieldOption instance
        """
        if not isinstance(data, dict):
            return cls()

        return cls(
            id=optional_str(data, "id"),
            name=optional_str(data, "name"),
            color=color_background(data),
        )


class YouTrackCustomFieldSchema(ApiModel):
    """
    Model representing the declared shape of a project custom field.

    `required` prefers an explicit `isRequired`, then the negation of
    `canBeEmpty`, and defaults to False.
    """

    name: str | None = None
    type: str | None = None
    required: bool = False
    can_be_empty: bool = True
    default_value: Any = None
    possible_values: list[YouTrackCustomFieldOption] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackCustomFieldSchema":
        """
        Create a YouTrackCustomFieldSchema from a project custom field entry.

        Args:
            data: The entry from the YouTrack API, nested or flat, with or
                without a `projectCustomField` wrapper

        Returns:
            A YouTrackCustomFieldSchema instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        block = unwrap_project_custom_field(data)
        identity = merge_field_identity(
            parse_nested_field_identity(block), parse_flat_field_identity(block)
        )

        is_required = block.get("isRequired")
        can_be_empty = block.get("canBeEmpty")
        if isinstance(is_required, bool):
            required = is_required
        elif isinstance(can_be_empty, bool):
            required = not can_be_empty
        else:
            required = False

        possible_values = []
        bundle = block.get("bundle")
        if isinstance(bundle, dict) and isinstance(bundle.get("values"), list):
            possible_values = [
                YouTrackCustomFieldOption.from_api_response(value)
                for value in bundle["values"]
                if isinstance(value, dict)
            ]

        return cls(
            name=identity.name,
            type=identity.type,
            required=required,
            can_be_empty=can_be_empty if isinstance(can_be_empty, bool) else not required,
            default_value=block.get("defaultValue"),
            possible_values=possible_values,
        )


def custom_field_schemas(data: Any) -> list[YouTrackCustomFieldSchema]:
    """Decode a list of project custom field entries, skipping non-objects."""
    if not isinstance(data, list):
        return []
    return [
        YouTrackCustomFieldSchema.from_api_response(entry)
        for entry in data
        if isinstance(entry, dict)
    ]


class YouTrackIssueFieldsSchema(ApiModel):
    """
    Model representing the custom fields available in a project.
    """

    project_id: str
    fields: list[YouTrackCustomFieldSchema] = Field(default_factory=list)
