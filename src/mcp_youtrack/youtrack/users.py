"""User operations for YouTrack."""

import logging

from ..models.youtrack import YouTrackUserRef
from .client import YouTrackClient
from .constants import USER_FIELDS

logger = logging.getLogger("mcp-youtrack.users")


class YouTrackUsers:
    """YouTrack user operations."""

    def __init__(self, client: YouTrackClient) -> None:
        """Initialize YouTrack user operations.

        Args:
            client: YouTrack client
        """
        self.client = client

    def find_users(self, query: str, offset: int, limit: int) -> list[YouTrackUserRef]:
        """Find users by login, name or email.

        Args:
            query: Search text
            offset: Number of users to skip
            limit: Maximum number of users to return

        Returns:
            Matching users
        """
        page = self.client.list_page(
            "/users",
            fields=USER_FIELDS,
            offset=offset,
            limit=limit,
            params={"query": query},
            action="Find users",
        )
        return [YouTrackUserRef.from_api_response(item) for item in page.items]

    def get_current_user(self) -> YouTrackUserRef:
        """Get the user the token belongs to."""
        data = self.client.get("/users/me", fields=USER_FIELDS, action="Get current user")
        return YouTrackUserRef.from_api_response(data)
