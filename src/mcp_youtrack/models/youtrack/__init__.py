"""
YouTrack data models for the MCP YouTrack integration.

This package provides Pydantic models for YouTrack API data structures,
organized by entity type, plus the closed union used for custom field values.
"""

from .comment import YouTrackComment, YouTrackCommentsPage
from .common import YouTrackProjectRef, YouTrackTagRef, YouTrackUserRef
from .field import (
    YouTrackCustomFieldOption,
    YouTrackCustomFieldSchema,
    YouTrackIssueFieldsSchema,
)
from .issue import (
    YouTrackIssueCreated,
    YouTrackIssueDetails,
    YouTrackIssueSearchResult,
    YouTrackIssueSummary,
    YouTrackIssueUpdateResult,
)
from .link import YouTrackIssueLinkResult
from .project import YouTrackProjectDetails
from .search import YouTrackSavedSearch, YouTrackSavedSearchesPage
from .tag import TagAction, YouTrackManageTagsResult
from .values import (
    BoolValue,
    FieldValue,
    ListValue,
    NullValue,
    NumberValue,
    ReferenceValue,
    TextValue,
    flatten_field_value,
    parse_field_value,
)

__all__ = [
    # Reference models
    "YouTrackProjectRef",
    "YouTrackUserRef",
    "YouTrackTagRef",
    # Entity models
    "YouTrackComment",
    "YouTrackCommentsPage",
    "YouTrackCustomFieldOption",
    "YouTrackCustomFieldSchema",
    "YouTrackIssueFieldsSchema",
    "YouTrackIssueCreated",
    "YouTrackIssueDetails",
    "YouTrackIssueSearchResult",
    "YouTrackIssueSummary",
    "YouTrackIssueUpdateResult",
    "YouTrackIssueLinkResult",
    "YouTrackProjectDetails",
    "YouTrackSavedSearch",
    "YouTrackSavedSearchesPage",
    "TagAction",
    "YouTrackManageTagsResult",
    # Field value union
    "FieldValue",
    "NullValue",
    "TextValue",
    "ReferenceValue",
    "ListValue",
    "NumberValue",
    "BoolValue",
    "flatten_field_value",
    "parse_field_value",
]
