"""
Common YouTrack reference models.

This module provides Pydantic models for the small reference objects that
YouTrack embeds in larger entities: projects, users and tags.
"""

import logging
from typing import Any

from ..base import ApiModel

logger = logging.getLogger(__name__)


def color_background(data: Any) -> str | None:
    """Read `color.background` from a raw entity, tolerating any shape."""
    if isinstance(data, dict) and isinstance(data.get("color"), dict):
        background = data["color"].get("background")
        return background if isinstance(background, str) else None
    return None


def optional_str(data: dict[str, Any], key: str) -> str | None:
    """Return `data[key]` when it is a string, else None."""
    value = data.get(key)
    return value if isinstance(value, str) else None


class YouTrackProjectRef(ApiModel):
    """
    Model representing a reference to a YouTrack project.
    """

    id: str | None = None
    name: str | None = None
    short_name: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackProjectRef":
        """
        Create a YouTrackProjectRef from a YouTrack API response.

        Args:
            data: The project data from the YouTrack API

        Returns:
            A YouTrackProjectRef instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(
            id=optional_str(data, "id"),
            name=optional_str(data, "name"),
            short_name=optional_str(data, "shortName"),
        )


class YouTrackUserRef(ApiModel):
    """
    Model representing a YouTrack user.
    """

    id: str | None = None
    login: str | None = None
    full_name: str | None = None
    email: str | None = None
    timezone: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "YouTrackUserRef":
        """
        Create a YouTrackUserRef from a YouTrack API response.

        The time zone arrives as `timezone` from the users endpoints and as
        `timeZone` from some embedded references.

        Args:
            data: The user data from the YouTrack API

        Returns:
            A YouTrackUserRef instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(
            id=optional_str(data, "id"),
            login=optional_str(data, "login"),
            full_name=optional_str(data, "fullName"),
            email=optional_str(data, "email"),
            timezone=optional_str(data, "timezone") or optional_str(data, "timeZone"),
        )


class YouTrackTagRef(ApiModel):
    """
    Model representing a tag attached to an issue.

    A tag is identified by its id; names are only used to look the id up.
    """

    id: str | None = None
    name: str | None = None
    color: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "YouTrackTagRef":
        """
        Create a YouTrackTagRef from a YouTrack API response.

        Args:
            data: The tag data from the YouTrack API

        Returns:
            A YouTrackTagRef instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(
            id=optional_str(data, "id"),
            name=optional_str(data, "name"),
            color=color_background(data),
        )

    def matches_name(self, name: str) -> bool:
        """Case-insensitive comparison against the tag name."""
        return self.name is not None and self.name.casefold() == name.casefold()


def project_ref_or_none(data: Any) -> YouTrackProjectRef | None:
    """Decode an embedded project reference, None when absent."""
    return YouTrackProjectRef.from_api_response(data) if isinstance(data, dict) else None


def user_ref_or_none(data: Any) -> YouTrackUserRef | None:
    """Decode an embedded user reference, None when absent."""
    return YouTrackUserRef.from_api_response(data) if isinstance(data, dict) else None


def tag_refs(data: Any) -> list[YouTrackTagRef]:
    """Decode a list of tags, skipping entries that are not objects."""
    if not isinstance(data, list):
        return []
    return [YouTrackTagRef.from_api_response(tag) for tag in data if isinstance(tag, dict)]
