"""Issue link operations for YouTrack."""

import logging

from ..models.youtrack import YouTrackIssueLinkResult
from ..models.youtrack.link import parse_link_counts
from .client import YouTrackClient, path_segment
from .constants import ISSUE_LINK_FIELDS

logger = logging.getLogger("mcp-youtrack.links")

LINK_DIRECTIONS = ("OUTWARD", "INWARD", "BOTH")


class YouTrackLinks:
    """YouTrack issue link operations."""

    def __init__(self, client: YouTrackClient) -> None:
        """Initialize YouTrack link operations.

        Args:
            client: YouTrack client
        """
        self.client = client

    def link_issues(
        self,
        from_issue: str,
        to_issue: str,
        link_type: str,
        direction: str = "OUTWARD",
    ) -> YouTrackIssueLinkResult:
        """Link two issues.

        Args:
            from_issue: Source issue id or readable id
            to_issue: Target issue readable id
            link_type: Link type name (e.g. `relates to`, `duplicates`)
            direction: `OUTWARD`, `INWARD` or `BOTH`

        Returns:
            The link with per-type link counts of the source issue

        Raises:
            ValueError: If the direction is not recognised
        """
        direction = direction.upper()
        if direction not in LINK_DIRECTIONS:
            raise ValueError(
                f"Invalid link direction '{direction}', expected one of "
                f"{', '.join(LINK_DIRECTIONS)}"
            )

        body = {
            "linkType": {"name": link_type},
            "issues": [{"idReadable": to_issue}],
            "direction": direction,
        }
        logger.debug(f"Linking {from_issue} -> {to_issue} ({link_type}, {direction})")
        data = self.client.post(
            f"/issues/{path_segment(from_issue)}/links",
            fields=ISSUE_LINK_FIELDS,
            json=body,
            action=f"Link {from_issue} to {to_issue}",
        )
        return YouTrackIssueLinkResult(
            from_issue=from_issue,
            to_issue=to_issue,
            link_type=link_type,
            direction=direction,
            link_counts=parse_link_counts(data),
        )
