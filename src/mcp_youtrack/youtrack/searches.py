"""Saved search operations for YouTrack."""

from ..models.youtrack import YouTrackSavedSearch, YouTrackSavedSearchesPage
from .client import YouTrackClient
from .constants import SAVED_SEARCH_FIELDS


class YouTrackSavedSearches:
    """Saved searches of the current user."""

    def __init__(self, client: YouTrackClient) -> None:
        self.client = client

    def get_saved_searches(self, offset: int, limit: int) -> YouTrackSavedSearchesPage:
        """Get one page of the current user's saved issue searches."""
        page = self.client.list_page(
            "/user/issueSearches",
            fields=SAVED_SEARCH_FIELDS,
            offset=offset,
            limit=limit,
            action="Get saved searches",
        )
        return YouTrackSavedSearchesPage(
            searches=[YouTrackSavedSearch.from_api_response(item) for item in page.items],
            next_offset=page.next_offset,
        )
