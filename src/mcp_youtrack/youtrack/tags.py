"""Issue tag operations for YouTrack."""

import logging

from ..exceptions import TagNotFoundError
from ..models.youtrack import TagAction, YouTrackManageTagsResult, YouTrackTagRef
from .client import YouTrackClient, path_segment
from .constants import TAG_FIELDS

logger = logging.getLogger("mcp-youtrack.tags")


class YouTrackTags:
    """YouTrack issue tag operations.

    YouTrack exposes an issue's tags as a sub-resource: tags are added one
    POST at a time and removed by id, never replaced as a set.
    """

    def __init__(self, client: YouTrackClient) -> None:
        """Initialize YouTrack tag operations.

        Args:
            client: YouTrack client
        """
        self.client = client

    def list_tags(self, issue_id: str) -> list[YouTrackTagRef]:
        """Get the tags currently attached to an issue."""
        data = self.client.get_list(
            f"/issues/{path_segment(issue_id)}/tags",
            fields=TAG_FIELDS,
            action=f"Get tags of {issue_id}",
        )
        return [YouTrackTagRef.from_api_response(item) for item in data]

    def add_tag(self, issue_id: str, tag: str) -> None:
        """Attach a tag by name. Existing tags are not checked first."""
        logger.debug(f"Adding tag '{tag}' to {issue_id}")
        self.client.post(
            f"/issues/{path_segment(issue_id)}/tags",
            fields=TAG_FIELDS,
            json={"name": tag},
            action=f"Add tag '{tag}' to {issue_id}",
        )

    def remove_tag(self, issue_id: str, tag: str) -> None:
        """Detach a tag matched case-insensitively by name.

        Raises:
            TagNotFoundError: If no attached tag with an id matches the name
        """
        existing_tag = next(
            (existing for existing in self.list_tags(issue_id) if existing.matches_name(tag)),
            None,
        )
        if existing_tag is None or not existing_tag.id:
            logger.warning(f"Tag '{tag}' not found on {issue_id}")
            raise TagNotFoundError(issue_id, tag)

        logger.debug(f"Removing tag '{existing_tag.name}' ({existing_tag.id}) from {issue_id}")
        self.client.delete(
            f"/issues/{path_segment(issue_id)}/tags/{path_segment(existing_tag.id)}",
            fields=TAG_FIELDS,
            action=f"Remove tag '{tag}' from {issue_id}",
        )

    def manage_tag(
        self, issue_id: str, tag: str, action: TagAction
    ) -> YouTrackManageTagsResult:
        """Add or remove one tag and return the issue's tags afterwards.

        Args:
            issue_id: Issue id or readable id
            tag: Tag name
            action: Whether to add or remove the tag

        Returns:
            The tags re-read from YouTrack after the change

        Raises:
            TagNotFoundError: If a tag to remove is not attached to the issue
        """
        match action:
            case TagAction.ADD:
                self.add_tag(issue_id, tag)
            case TagAction.REMOVE:
                self.remove_tag(issue_id, tag)

        return YouTrackManageTagsResult(issue_id=issue_id, tags=self.list_tags(issue_id))
