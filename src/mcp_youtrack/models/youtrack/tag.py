"""
YouTrack tag management models.
"""

from enum import Enum

from pydantic import Field

from ..base import ApiModel
from .common import YouTrackTagRef


class TagAction(str, Enum):
    """Change to apply to an issue's tags."""

    ADD = "ADD"
    REMOVE = "REMOVE"

    @classmethod
    def parse(cls, value: "TagAction | str") -> "TagAction":
        """
        Accept a TagAction or its name in any case.

        Raises:
            ValueError: If the value names no action
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError as e:
            raise ValueError(
                f"Unknown tag action '{value}', expected one of "
                f"{', '.join(action.value for action in cls)}"
            ) from e


class YouTrackManageTagsResult(ApiModel):
    """
    Model representing an issue's tags after an add or remove.
    """

    issue_id: str
    tags: list[YouTrackTagRef] = Field(default_factory=list)
