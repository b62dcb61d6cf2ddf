"""
YouTrack issue models.

This module provides Pydantic models for YouTrack issues as returned by the
search, detail, create and update endpoints.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import Field

from ...utils.date import parse_timestamp
from ..base import ApiModel, TimestampMixin
from .common import (
    YouTrackProjectRef,
    YouTrackTagRef,
    YouTrackUserRef,
    optional_str,
    project_ref_or_none,
    tag_refs,
    user_ref_or_none,
)
from .values import flatten_field_value, parse_field_value

logger = logging.getLogger(__name__)


def decode_custom_fields(data: Any) -> dict[str, Any] | None:
    """
    Decode an issue's `customFields` list into a name to value map.

    Each value is flattened so reference objects are reduced to their
    display name or login. Entries without a name are skipped.

    Args:
        data: The raw `customFields` value

    Returns:
        Ordered map of field name to flattened value, or None when the
        response carries no custom field list
    """
    if not isinstance(data, list):
        return None

    result: dict[str, Any] = {}
    for entry in data:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        if not isinstance(name, str):
            continue
        result[name] = flatten_field_value(parse_field_value(entry.get("value")))
    return result


class YouTrackIssueSummary(ApiModel, TimestampMixin):
    """
    Model representing an issue as listed by a search.
    """

    id: str | None = None
    id_readable: str | None = None
    summary: str | None = None
    project: YouTrackProjectRef | None = None
    reporter: YouTrackUserRef | None = None
    created: datetime | None = None
    updated: datetime | None = None
    resolved: datetime | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackIssueSummary":
        """
        Create a YouTrackIssueSummary from a YouTrack API response.

        Args:
            data: The issue data from the YouTrack API

        Returns:
            A YouTrackIssueSummary instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        return cls(
            id=optional_str(data, "id"),
            id_readable=optional_str(data, "idReadable"),
            summary=optional_str(data, "summary"),
            project=project_ref_or_none(data.get("project")),
            reporter=user_ref_or_none(data.get("reporter")),
            created=parse_timestamp(data.get("created")),
            updated=parse_timestamp(data.get("updated")),
            resolved=parse_timestamp(data.get("resolved")),
        )


class YouTrackIssueDetails(YouTrackIssueSummary):
    """
    Model representing a single issue with its description, tags, votes and
    flattened custom fields.
    """

    description: str | None = None
    tags: list[YouTrackTagRef] = Field(default_factory=list)
    votes: int | None = None
    custom_fields: dict[str, Any] | None = None
    url: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackIssueDetails":
        """
        Create a YouTrackIssueDetails from a YouTrack API response.

        Args:
            data: The issue data from the YouTrack API

        Returns:
            A YouTrackIssueDetails instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        summary = YouTrackIssueSummary.from_api_response(data)

        votes = data.get("votes")
        if isinstance(votes, bool) or not isinstance(votes, int | float):
            votes = None

        return cls(
            **dict(summary),
            description=optional_str(data, "description"),
            tags=tag_refs(data.get("tags")),
            votes=int(votes) if votes is not None else None,
            custom_fields=decode_custom_fields(data.get("customFields")),
            url=optional_str(data, "url"),
        )


class YouTrackIssueSearchResult(ApiModel):
    """
    Model representing one page of issue search results.
    """

    issues: list[YouTrackIssueSummary] = Field(default_factory=list)
    total: int | None = None
    next_offset: int | None = None


class YouTrackIssueCreated(ApiModel):
    """
    Model representing the response to an issue creation.
    """

    id: str | None = None
    id_readable: str | None = None
    summary: str | None = None
    url: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackIssueCreated":
        """
        Create a YouTrackIssueCreated from a YouTrack API response.

        Args:
            data: The created issue data from the YouTrack API

        Returns:
            A YouTrackIssueCreated instance
        """
        if not isinstance(data, dict):
            return cls()

        return cls(
            id=optional_str(data, "id"),
            id_readable=optional_str(data, "idReadable"),
            summary=optional_str(data, "summary"),
            url=optional_str(data, "url"),
        )


class YouTrackIssueUpdateResult(ApiModel):
    """
    Model representing the response to an issue update.
    """

    id: str | None = None
    id_readable: str | None = None
    summary: str | None = None
    fields_updated: list[str] = Field(default_factory=list)
    url: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "YouTrackIssueUpdateResult":
        """
        Create a YouTrackIssueUpdateResult from a YouTrack API response.

        Args:
            data: The updated issue data from the YouTrack API
            **kwargs:
                issue_id: id the update was sent to, used when the response
                    carries none
                fields_updated: keys of the update payload

        Returns:
            A YouTrackIssueUpdateResult instance
        """
        if not isinstance(data, dict):
            data = {}

        return cls(
            id=optional_str(data, "id") or kwargs.get("issue_id"),
            id_readable=optional_str(data, "idReadable"),
            summary=optional_str(data, "summary"),
            fields_updated=list(kwargs.get("fields_updated", [])),
            url=optional_str(data, "url"),
        )
