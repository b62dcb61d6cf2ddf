"""Issue operations for YouTrack."""

import logging
from collections.abc import Mapping
from typing import Any

from ..models.youtrack import (
    YouTrackIssueCreated,
    YouTrackIssueDetails,
    YouTrackIssueSearchResult,
    YouTrackIssueSummary,
    YouTrackIssueUpdateResult,
)
from .client import YouTrackClient, path_segment
from .config import YouTrackConfig
from .constants import (
    ASSIGNEE_FIELD_NAME,
    ISSUE_CREATED_FIELDS,
    ISSUE_DETAIL_FIELDS,
    ISSUE_SEARCH_FIELDS,
    ISSUE_UPDATED_FIELDS,
    STATE_FIELD,
)
from .fields import build_custom_field, build_custom_fields, tag_refs_payload
from .projects import YouTrackProjects

logger = logging.getLogger("mcp-youtrack.issues")


class YouTrackIssues:
    """YouTrack issue operations."""

    def __init__(
        self,
        client: YouTrackClient,
        projects: YouTrackProjects,
        config: YouTrackConfig,
    ) -> None:
        """Initialize YouTrack issue operations.

        Args:
            client: YouTrack client
            projects: Project operations, used to resolve project references
            config: YouTrack configuration
        """
        self.client = client
        self.projects = projects
        self.config = config

    def search_issues(self, query: str, offset: int, limit: int) -> YouTrackIssueSearchResult:
        """Search issues with a YouTrack query.

        Args:
            query: YouTrack query language string (e.g. `project: WEB #Unresolved`)
            offset: Number of issues to skip
            limit: Maximum number of issues to return

        Returns:
            The page of matching issues with its continuation offset
        """
        page = self.client.list_page(
            "/issues",
            fields=ISSUE_SEARCH_FIELDS,
            offset=offset,
            limit=limit,
            params={"query": query},
            action="Search issues",
        )
        return YouTrackIssueSearchResult(
            issues=[YouTrackIssueSummary.from_api_response(item) for item in page.items],
            total=page.total,
            next_offset=page.next_offset,
        )

    def get_issue(self, issue_id: str) -> YouTrackIssueDetails:
        """Get an issue with its tags and custom fields.

        Args:
            issue_id: Issue id or readable id

        Returns:
            Issue details
        """
        data = self.client.get(
            f"/issues/{path_segment(issue_id)}",
            fields=ISSUE_DETAIL_FIELDS,
            action=f"Get issue {issue_id}",
        )
        return YouTrackIssueDetails.from_api_response(data)

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
            project_id_or_key: Project id (`0-12`) or short name (`WEB`)
            summary: Issue summary
            description: Issue description
            custom_fields: Map of custom field name to value
            tags: Tag names to attach
            assignee: Login of the assignee
            draft: Create a draft instead of a reported issue

        Returns:
            The created issue
        """
        body: dict[str, Any] = {
            "project": self.projects.build_project_ref(project_id_or_key),
            "summary": summary,
        }
        if description is not None:
            body["description"] = description

        custom_field_payload = build_custom_fields(custom_fields or {})
        if assignee is not None:
            custom_field_payload.append(
                build_custom_field(ASSIGNEE_FIELD_NAME, {"login": assignee})
            )
        if custom_field_payload:
            body["customFields"] = custom_field_payload
        if tags:
            body["tags"] = tag_refs_payload(tags)

        params = {"draft": "true"} if draft else None
        logger.debug(f"Creating {'draft ' if draft else ''}issue in {project_id_or_key}")
        data = self.client.post(
            "/issues",
            fields=ISSUE_CREATED_FIELDS,
            json=body,
            params=params,
            action=f"Create issue in {project_id_or_key}",
        )
        return YouTrackIssueCreated.from_api_response(data)

    def update_issue(
        self,
        issue_id: str,
        summary: str | None = None,
        description: str | None = None,
        custom_fields: Mapping[str, Any] | None = None,
        tags: list[str] | None = None,
    ) -> YouTrackIssueUpdateResult:
        """Update an issue. Only the parts given are sent.

        Empty custom field maps and tag lists are treated as not given.
        The update is applied without reading the issue first.

        Args:
            issue_id: Issue id or readable id
            summary: New summary
            description: New description
            custom_fields: Map of custom field name to value
            tags: Tag names to set

        Returns:
            The update result listing the parts that were sent
        """
        body: dict[str, Any] = {}
        if summary is not None:
            body["summary"] = summary
        if description is not None:
            body["description"] = description
        if custom_fields:
            body["customFields"] = build_custom_fields(custom_fields)
        if tags:
            body["tags"] = tag_refs_payload(tags)

        return self._post_update(issue_id, body, action=f"Update issue {issue_id}")

    def change_assignee(self, issue_id: str, assignee: str) -> YouTrackIssueUpdateResult:
        """Set the Assignee field to the user with the given login."""
        return self.update_issue(
            issue_id, custom_fields={ASSIGNEE_FIELD_NAME: {"login": assignee}}
        )

    def change_issue_status(
        self, issue_id: str, status: str, field_name: str | None = None
    ) -> YouTrackIssueUpdateResult:
        """Move an issue to another state.

        Args:
            issue_id: Issue id or readable id
            status: Name of the target state
            field_name: State field to set, defaults to the configured one

        Returns:
            The update result
        """
        name = field_name or self.config.state_field
        body = {
            "customFields": [
                {"name": name, "$type": STATE_FIELD, "value": {"name": status}}
            ]
        }
        return self._post_update(
            issue_id, body, action=f"Change {name} of {issue_id} to {status}"
        )

    def _post_update(
        self, issue_id: str, body: dict[str, Any], action: str
    ) -> YouTrackIssueUpdateResult:
        data = self.client.post(
            f"/issues/{path_segment(issue_id)}",
            fields=ISSUE_UPDATED_FIELDS,
            json=body,
            action=action,
        )
        return YouTrackIssueUpdateResult.from_api_response(
            data, issue_id=issue_id, fields_updated=list(body)
        )
