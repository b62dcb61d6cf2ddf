"""
YouTrack issue link models.
"""

from typing import Any

from ..base import ApiModel


def parse_link_counts(data: Any) -> dict[str, int] | None:
    """
    Read per-link-type issue counts from a link response.

    Args:
        data: The raw response, expected to carry `linkTypeAggregated`
            entries of the form `{"name": ..., "issues": {"size": n}}`

    Returns:
        Map of link type name to linked issue count, or None when the
        response carries no usable counts
    """
    if not isinstance(data, dict):
        return None
    aggregated = data.get("linkTypeAggregated")
    if not isinstance(aggregated, list):
        return None

    counts: dict[str, int] = {}
    for entry in aggregated:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        issues = entry.get("issues")
        size = issues.get("size") if isinstance(issues, dict) else None
        if isinstance(name, str) and isinstance(size, int | float) and not isinstance(size, bool):
            counts[name] = int(size)
    return counts or None


class YouTrackIssueLinkResult(ApiModel):
    """
    Model representing the outcome of linking two issues.
    """

    from_issue: str
    to_issue: str
    link_type: str
    direction: str
    link_counts: dict[str, int] | None = None
