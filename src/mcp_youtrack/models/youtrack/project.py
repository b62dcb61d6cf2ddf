"""
YouTrack project models.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import Field

from ...utils.date import parse_timestamp
from ..base import ApiModel, TimestampMixin
from .common import YouTrackUserRef, optional_str, user_ref_or_none
from .field import YouTrackCustomFieldSchema, custom_field_schemas

logger = logging.getLogger(__name__)


class YouTrackProjectDetails(ApiModel, TimestampMixin):
    """
    Model representing a project with its leader and custom field schemas.
    """

    id: str | None = None
    name: str | None = None
    short_name: str | None = None
    description: str | None = None
    leader: YouTrackUserRef | None = None
    created: datetime | None = None
    custom_field_schemas: list[YouTrackCustomFieldSchema] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackProjectDetails":
        """
        Create a YouTrackProjectDetails from a YouTrack API response.

        Args:
            data: The project data from the YouTrack API

        Returns:
            A YouTrackProjectDetails instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(
            id=optional_str(data, "id"),
            name=optional_str(data, "name"),
            short_name=optional_str(data, "shortName"),
            description=optional_str(data, "description"),
            leader=user_ref_or_none(data.get("leader")),
            created=parse_timestamp(data.get("created")),
            custom_field_schemas=custom_field_schemas(data.get("customFields")),
        )
