"""
Base models and utility classes for the MCP YouTrack models.

This module provides the base classes every YouTrack entity model
derives from, so that decoding and simplification share one shape.
"""

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.

    Instances are immutable once decoded from a response.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary for API responses.

        Returns:
            A dictionary with only the essential fields, timestamps as ISO strings
        """
        return self.model_dump(exclude_none=True, mode="json")


class TimestampMixin:
    """
    Mixin for models that carry decoded timestamps.
    """

    @staticmethod
    def format_timestamp(value: datetime | None) -> str | None:
        """
        Format a decoded timestamp as an ISO-8601 string.

        Args:
            value: The timestamp, or None

        Returns:
            ISO-8601 string, or None when the timestamp is absent
        """
        return value.isoformat() if value else None
