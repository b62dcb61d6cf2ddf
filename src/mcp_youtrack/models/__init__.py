"""
Pydantic models for YouTrack API data structures.
"""

from .base import ApiModel, TimestampMixin
from .youtrack import (
    BoolValue,
    FieldValue,
    ListValue,
    NullValue,
    NumberValue,
    ReferenceValue,
    TagAction,
    TextValue,
    YouTrackComment,
    YouTrackCommentsPage,
    YouTrackCustomFieldOption,
    YouTrackCustomFieldSchema,
    YouTrackIssueCreated,
    YouTrackIssueDetails,
    YouTrackIssueFieldsSchema,
    YouTrackIssueLinkResult,
    YouTrackIssueSearchResult,
    YouTrackIssueSummary,
    YouTrackIssueUpdateResult,
    YouTrackManageTagsResult,
    YouTrackProjectDetails,
    YouTrackProjectRef,
    YouTrackSavedSearch,
    YouTrackSavedSearchesPage,
    YouTrackTagRef,
    YouTrackUserRef,
    parse_field_value,
)

__all__ = [
    "ApiModel",
    "TimestampMixin",
    # Field value union
    "FieldValue",
    "NullValue",
    "TextValue",
    "ReferenceValue",
    "ListValue",
    "NumberValue",
    "BoolValue",
    "parse_field_value",
    # Entity models
    "TagAction",
    "YouTrackComment",
    "YouTrackCommentsPage",
    "YouTrackCustomFieldOption",
    "YouTrackCustomFieldSchema",
    "YouTrackIssueCreated",
    "YouTrackIssueDetails",
    "YouTrackIssueFieldsSchema",
    "YouTrackIssueLinkResult",
    "YouTrackIssueSearchResult",
    "YouTrackIssueSummary",
    "YouTrackIssueUpdateResult",
    "YouTrackManageTagsResult",
    "YouTrackProjectDetails",
    "YouTrackProjectRef",
    "YouTrackSavedSearch",
    "YouTrackSavedSearchesPage",
    "YouTrackTagRef",
    "YouTrackUserRef",
]
