"""Utility functions for YouTrack timestamp values."""

import logging
import re
from datetime import datetime, timezone
from typing import Any

import dateutil.parser

logger = logging.getLogger("mcp-youtrack.utils")

EPOCH_MILLIS_PATTERN = re.compile(r"^-?\d+$")


def _from_epoch_millis(millis: float) -> datetime | None:
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (ValueError, OverflowError, OSError) as e:
        logger.debug(f"Epoch value {millis} out of range: {str(e)}")
        return None


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse a YouTrack timestamp into an aware datetime.

    YouTrack usually sends epoch milliseconds, but depending on the endpoint
    the value may arrive as a number, as a numeric string, or as an
    ISO-8601 string.

    The input `value` accepts:
    - None
    - int or float epoch milliseconds
    - A string of digits holding epoch milliseconds
    - An ISO-8601 string (naive values are taken as UTC)

    Args:
        value: Raw timestamp value from a decoded response

    Returns:
        Timezone-aware datetime, or None for any other shape
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int | float):
        return _from_epoch_millis(value)

    if not isinstance(value, str):
        logger.debug(f"Unsupported timestamp type: {type(value)}")
        return None

    text = value.strip()
    if not text:
        return None

    if EPOCH_MILLIS_PATTERN.match(text):
        try:
            millis = int(text)
        except ValueError as e:
            logger.debug(f"Epoch value of {len(text)} digits rejected: {str(e)}")
            return None
        return _from_epoch_millis(millis)

    try:
        parsed = dateutil.parser.isoparse(text)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse timestamp '{value}': {str(e)}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
