"""YouTrack integration for MCP YouTrack."""

import logging
from collections.abc import Mapping
from typing import Any

from ..logging_config import log_operation
from ..models.youtrack import (
    TagAction,
    YouTrackComment,
    YouTrackCommentsPage,
    YouTrackIssueCreated,
    YouTrackIssueDetails,
    YouTrackIssueFieldsSchema,
    YouTrackIssueLinkResult,
    YouTrackIssueSearchResult,
    YouTrackIssueUpdateResult,
    YouTrackManageTagsResult,
    YouTrackProjectDetails,
    YouTrackProjectRef,
    YouTrackSavedSearchesPage,
    YouTrackUserRef,
)
from .client import YouTrackClient, YouTrackPage
from .comments import YouTrackComments
from .config import YouTrackConfig
from .constants import DEFAULT_LIMIT, DEFAULT_OFFSET, MAX_LIMIT, MIN_LIMIT
from .issues import YouTrackIssues
from .links import YouTrackLinks
from .projects import YouTrackProjects
from .searches import YouTrackSavedSearches
from .tags import YouTrackTags
from .users import YouTrackUsers

logger = logging.getLogger("mcp-youtrack.youtrack")


def normalize_pagination(offset: int | None, limit: int | None) -> tuple[int, int]:
    """Clamp caller-supplied paging to offset >= 0 and 1 <= limit <= 200.

    Missing values fall back to offset 0 and limit 20.
    """
    offset = DEFAULT_OFFSET if offset is None else max(offset, 0)
    limit = DEFAULT_LIMIT if limit is None else min(max(limit, MIN_LIMIT), MAX_LIMIT)
    return offset, limit


class YouTrackFetcher:
    """Main interface for YouTrack operations.

    Paginated operations accept any offset and limit and clamp them before
    the request is sent. Every call is logged as one operation.
    """

    def __init__(self, config: YouTrackConfig | None = None) -> None:
        """Initialize YouTrack fetcher.

        Args:
            config: YouTrack configuration, read from the environment when omitted
        """
        self.config = config or YouTrackConfig.from_env()
        self.client = YouTrackClient(self.config)
        self.projects = YouTrackProjects(self.client)
        self.issues = YouTrackIssues(self.client, self.projects, self.config)
        self.comments = YouTrackComments(self.client)
        self.tags = YouTrackTags(self.client)
        self.links = YouTrackLinks(self.client)
        self.users = YouTrackUsers(self.client)
        self.saved_searches = YouTrackSavedSearches(self.client)

    def close(self) -> None:
        """Release the HTTP session."""
        self.client.close()

    def search_issues(
        self, query: str, offset: int | None = None, limit: int | None = None
    ) -> YouTrackIssueSearchResult:
        """Search issues with a YouTrack query.

        Args:
            query: YouTrack query language string
            offset: Number of issues to skip (default 0)
            limit: Maximum number of issues to return (default 20, at most 200)

        Returns:
            The page of matching issues
        """
        offset, limit = normalize_pagination(offset, limit)
        with log_operation(logger, "search_issues", offset=offset, limit=limit):
            return self.issues.search_issues(query, offset, limit)

    def get_issue(self, issue_id: str) -> YouTrackIssueDetails:
        """Get an issue by id or readable id."""
        with log_operation(logger, "get_issue", issue_id=issue_id):
            return self.issues.get_issue(issue_id)

    def create_issue(
        self,
        project_id_or_key: str,
        summary: str,
        description: str | None = None,
        custom_fields: Mapping[str, Any] | None = None,
        tags: list[str] | None = None,
        assignee: str | None = None,
        draft: bool = False,
    ) -> YouTrackIssueCreated:
        """Create an issue.

        Args:
            project_id_or_key: Project id (`0-12`) or short name
            summary: Issue summary
            description: Issue description
            custom_fields: Map of custom field name to value
            tags: Tag names to attach
            assignee: Login of the assignee
            draft: Create a draft instead of a reported issue

        Returns:
            The created issue
        """
        with log_operation(logger, "create_issue", project=project_id_or_key):
            return self.issues.create_issue(
                project_id_or_key,
                summary,
                description=description,
                custom_fields=custom_fields,
                tags=tags,
                assignee=assignee,
                draft=draft,
            )

    def update_issue(
        self,
        issue_id: str,
        summary: str | None = None,
        description: str | None = None,
        custom_fields: Mapping[str, Any] | None = None,
        tags: list[str] | None = None,
    ) -> YouTrackIssueUpdateResult:
        """Update the given parts of an issue."""
        with log_operation(logger, "update_issue", issue_id=issue_id):
            return self.issues.update_issue(
                issue_id,
                summary=summary,
                description=description,
                custom_fields=custom_fields,
                tags=tags,
            )

    def change_assignee(self, issue_id: str, assignee: str) -> YouTrackIssueUpdateResult:
        """Assign an issue to the user with the given login."""
        with log_operation(logger, "change_assignee", issue_id=issue_id):
            return self.issues.change_assignee(issue_id, assignee)

    def change_issue_status(
        self, issue_id: str, status: str, field_name: str | None = None
    ) -> YouTrackIssueUpdateResult:
        """Move an issue to another state."""
        with log_operation(logger, "change_issue_status", issue_id=issue_id):
            return self.issues.change_issue_status(issue_id, status, field_name)

    def add_comment(self, issue_id: str, text: str) -> YouTrackComment:
        """Add a comment to an issue."""
        with log_operation(logger, "add_comment", issue_id=issue_id):
            return self.comments.add_comment(issue_id, text)

    def get_comments(
        self, issue_id: str, offset: int | None = None, limit: int | None = None
    ) -> YouTrackCommentsPage:
        """Get one page of an issue's comments."""
        offset, limit = normalize_pagination(offset, limit)
        with log_operation(
            logger, "get_comments", issue_id=issue_id, offset=offset, limit=limit
        ):
            return self.comments.get_comments(issue_id, offset, limit)

    def get_saved_searches(
        self, offset: int | None = None, limit: int | None = None
    ) -> YouTrackSavedSearchesPage:
        """Get one page of the current user's saved searches."""
        offset, limit = normalize_pagination(offset, limit)
        with log_operation(logger, "get_saved_searches", offset=offset, limit=limit):
            return self.saved_searches.get_saved_searches(offset, limit)

    def manage_tag(
        self, issue_id: str, tag: str, action: TagAction | str
    ) -> YouTrackManageTagsResult:
        """Add or remove a tag on an issue.

        Args:
            issue_id: Issue id or readable id
            tag: Tag name
            action: `TagAction` or its name in any case (`add`, `REMOVE`)

        Returns:
            The issue's tags after the change

        Raises:
            ValueError: If the action is not recognised
            TagNotFoundError: If a tag to remove is not attached to the issue
        """
        tag_action = TagAction.parse(action)
        with log_operation(
            logger, "manage_tag", issue_id=issue_id, action=tag_action.value
        ):
            return self.tags.manage_tag(issue_id, tag, tag_action)

    def link_issues(
        self,
        from_issue: str,
        to_issue: str,
        link_type: str,
        direction: str = "OUTWARD",
    ) -> YouTrackIssueLinkResult:
        """Link two issues."""
        with log_operation(logger, "link_issues", from_issue=from_issue):
            return self.links.link_issues(from_issue, to_issue, link_type, direction)

    def find_projects(
        self, query: str, offset: int | None = None, limit: int | None = None
    ) -> list[YouTrackProjectRef]:
        """Find projects by name."""
        offset, limit = normalize_pagination(offset, limit)
        with log_operation(logger, "find_projects", offset=offset, limit=limit):
            return self.projects.find_projects(query, offset, limit)

    def get_project(self, project_id_or_key: str) -> YouTrackProjectDetails:
        """Get a project by id or short name."""
        with log_operation(logger, "get_project", project=project_id_or_key):
            return self.projects.get_project(project_id_or_key)

    def get_issue_fields_schema(self, project_id_or_key: str) -> YouTrackIssueFieldsSchema:
        """Get the custom field schemas of a project."""
        with log_operation(logger, "get_issue_fields_schema", project=project_id_or_key):
            return self.projects.get_issue_fields_schema(project_id_or_key)

    def find_users(
        self, query: str, offset: int | None = None, limit: int | None = None
    ) -> list[YouTrackUserRef]:
        """Find users by login, name or email."""
        offset, limit = normalize_pagination(offset, limit)
        with log_operation(logger, "find_users", offset=offset, limit=limit):
            return self.users.find_users(query, offset, limit)

    def get_current_user(self) -> YouTrackUserRef:
        """Get the user the token belongs to."""
        with log_operation(logger, "get_current_user"):
            return self.users.get_current_user()


__all__ = [
    "YouTrackClient",
    "YouTrackConfig",
    "YouTrackFetcher",
    "YouTrackPage",
    "normalize_pagination",
]
