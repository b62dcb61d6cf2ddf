"""Issue comment operations for YouTrack."""

import logging

from ..models.youtrack import YouTrackComment, YouTrackCommentsPage
from .client import YouTrackClient, path_segment
from .constants import COMMENT_FIELDS

logger = logging.getLogger("mcp-youtrack.comments")


class YouTrackComments:
    """YouTrack issue comment operations."""

    def __init__(self, client: YouTrackClient) -> None:
        """Initialize YouTrack comment operations.

        Args:
            client: YouTrack client
        """
        self.client = client

    def add_comment(self, issue_id: str, text: str) -> YouTrackComment:
        """Add a comment to an issue.

        Args:
            issue_id: Issue id or readable id (e.g. `WEB-132`)
            text: Comment text, Markdown supported

        Returns:
            The created comment
        """
        logger.debug(f"Adding comment to {issue_id}")
        data = self.client.post(
            f"/issues/{path_segment(issue_id)}/comments",
            fields=COMMENT_FIELDS,
            json={"text": text},
            action=f"Add comment to {issue_id}",
        )
        return YouTrackComment.from_api_response(data)

    def get_comments(self, issue_id: str, offset: int, limit: int) -> YouTrackCommentsPage:
        """Get one page of an issue's comments.

        Args:
            issue_id: Issue id or readable id
            offset: Number of comments to skip
            limit: Maximum number of comments to return

        Returns:
            The page of comments with its continuation offset
        """
        page = self.client.list_page(
            f"/issues/{path_segment(issue_id)}/comments",
            fields=COMMENT_FIELDS,
            offset=offset,
            limit=limit,
            action=f"Get comments of {issue_id}",
        )
        return YouTrackCommentsPage(
            issue_id=issue_id,
            comments=[YouTrackComment.from_api_response(item) for item in page.items],
            next_offset=page.next_offset,
        )
