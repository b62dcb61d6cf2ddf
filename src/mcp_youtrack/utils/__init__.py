"""
Utility functions for the MCP YouTrack integration.
"""

from .date import parse_timestamp
from .env import get_env_float, is_env_ssl_verify, is_env_truthy

__all__ = [
    "get_env_float",
    "is_env_ssl_verify",
    "is_env_truthy",
    "parse_timestamp",
]
