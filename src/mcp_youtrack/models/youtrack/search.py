"""
YouTrack saved search models.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from .common import YouTrackUserRef, optional_str, user_ref_or_none


class YouTrackSavedSearch(ApiModel):
    """
    Model representing a saved issue search of the current user.
    """

    id: str | None = None
    name: str | None = None
    query: str | None = None
    owner: YouTrackUserRef | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackSavedSearch":
        """
        Create a YouTrackSavedSearch from a YouTrack API response.

        Args:
            data: The saved search data from the YouTrack API

        Returns:
            A YouTrackSavedSearch instance
        """
        if not isinstance(data, dict):
            return cls()

        return cls(
            id=optional_str(data, "id"),
            name=optional_str(data, "name"),
            query=optional_str(data, "query"),
            owner=user_ref_or_none(data.get("owner")),
        )


class YouTrackSavedSearchesPage(ApiModel):
    """One page of saved searches."""

    searches: list[YouTrackSavedSearch] = Field(default_factory=list)
    next_offset: int | None = None
