"""
YouTrack comment models.

This module provides Pydantic models for issue comments.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import Field

from ...utils.date import parse_timestamp
from ..base import ApiModel, TimestampMixin
from .common import YouTrackUserRef, optional_str, user_ref_or_none

logger = logging.getLogger(__name__)


class YouTrackComment(ApiModel, TimestampMixin):
    """
    Model representing a YouTrack issue comment.
    """

    id: str | None = None
    author: YouTrackUserRef | None = None
    text: str | None = None
    created: datetime | None = None
    updated: datetime | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "YouTrackComment":
        """
        Create a YouTrackComment from a YouTrack API response.

        Args:
            data: The comment data from the YouTrack API

        Returns:
            A YouTrackComment instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(
            id=optional_str(data, "id"),
            author=user_ref_or_none(data.get("author")),
            text=optional_str(data, "text"),
            created=parse_timestamp(data.get("created")),
            updated=parse_timestamp(data.get("updated")),
        )


class YouTrackCommentsPage(ApiModel):
    """
    Model representing one page of comments on an issue.
    """

    issue_id: str
    comments: list[YouTrackComment] = Field(default_factory=list)
    next_offset: int | None = None
