"""Project operations for YouTrack."""

import logging
import re

from ..exceptions import MCPYouTrackError
from ..models.youtrack import (
    YouTrackIssueFieldsSchema,
    YouTrackProjectDetails,
    YouTrackProjectRef,
)
from ..models.youtrack.field import custom_field_schemas
from .client import YouTrackClient, path_segment
from .constants import (
    CUSTOM_FIELD_SCHEMA_FIELDS,
    PROJECT_DETAIL_FIELDS,
    PROJECT_ENTITY_ID_PATTERN,
    PROJECT_REF_FIELDS,
)

logger = logging.getLogger("mcp-youtrack.projects")

_ENTITY_ID = re.compile(PROJECT_ENTITY_ID_PATTERN)


def is_project_entity_id(project_id_or_key: str) -> bool:
    """True when the value looks like a database id such as `0-12`."""
    return bool(_ENTITY_ID.match(project_id_or_key))


class YouTrackProjects:
    """YouTrack project operations."""

    def __init__(self, client: YouTrackClient) -> None:
        """Initialize YouTrack project operations.

        Args:
            client: YouTrack client
        """
        self.client = client

    def find_projects(self, query: str, offset: int, limit: int) -> list[YouTrackProjectRef]:
        """Find projects whose names match a query.

        Args:
            query: Substring to search in project names
            offset: Number of projects to skip
            limit: Maximum number of projects to return

        Returns:
            Matching project references
        """
        page = self.client.list_page(
            "/admin/projects",
            fields=PROJECT_REF_FIELDS,
            offset=offset,
            limit=limit,
            params={"query": query},
            action="Find projects",
        )
        return [YouTrackProjectRef.from_api_response(item) for item in page.items]

    def get_project(self, project_id_or_key: str) -> YouTrackProjectDetails:
        """Get a project with its leader and custom field schemas.

        Args:
            project_id_or_key: Project id (`0-12`) or short name (`DEMO`)

        Returns:
            Project details
        """
        data = self.client.get(
            f"/admin/projects/{path_segment(project_id_or_key)}",
            fields=PROJECT_DETAIL_FIELDS,
            action=f"Get project {project_id_or_key}",
        )
        return YouTrackProjectDetails.from_api_response(data)

    def get_issue_fields_schema(self, project_id_or_key: str) -> YouTrackIssueFieldsSchema:
        """Get the custom fields declared for a project.

        Args:
            project_id_or_key: Project id or short name

        Returns:
            The project's custom field schemas
        """
        data = self.client.get_list(
            f"/admin/projects/{path_segment(project_id_or_key)}/customFields",
            fields=CUSTOM_FIELD_SCHEMA_FIELDS,
            action=f"Get custom fields of project {project_id_or_key}",
        )
        return YouTrackIssueFieldsSchema(
            project_id=project_id_or_key, fields=custom_field_schemas(data)
        )

    def build_project_ref(self, project_id_or_key: str) -> dict[str, str]:
        """Build the project reference for an issue creation payload.

        An entity id is sent as `{"id": ...}` directly. Anything else is
        taken as a short name and looked up first, so the payload carries
        the project's id and name; if the lookup fails the short name is
        sent on its own.

        Args:
            project_id_or_key: Project id or short name supplied by the caller

        Returns:
            Project reference payload
        """
        if is_project_entity_id(project_id_or_key):
            return {"id": project_id_or_key}

        try:
            project = self.get_project(project_id_or_key)
        except MCPYouTrackError as e:
            logger.warning(
                f"Project lookup for '{project_id_or_key}' failed, "
                f"sending short name only: {str(e)}"
            )
            return {"shortName": project_id_or_key}

        ref = {
            "id": project.id,
            "shortName": project.short_name or project_id_or_key,
            "name": project.name,
        }
        return {key: value for key, value in ref.items() if value}
