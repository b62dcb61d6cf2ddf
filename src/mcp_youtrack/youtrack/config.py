"""Configuration module for YouTrack API interactions."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from ..utils.env import get_env_float, is_env_ssl_verify
from .constants import (
    DEFAULT_SSL_VERIFY,
    DEFAULT_STATE_FIELD,
    DEFAULT_TIMEOUT,
    ENV_YOUTRACK_SSL_VERIFY,
    ENV_YOUTRACK_STATE_FIELD,
    ENV_YOUTRACK_TIMEOUT,
    ENV_YOUTRACK_TOKEN,
    ENV_YOUTRACK_URL,
)


@dataclass(frozen=True)
class YouTrackConfig:
    """YouTrack API configuration.

    YouTrack authenticates every request with a permanent token sent as a
    bearer credential.
    """

    url: str  # Base URL for YouTrack, without the /api suffix
    token: str  # Permanent token
    ssl_verify: bool = DEFAULT_SSL_VERIFY  # Whether to verify SSL certificates
    timeout: float = DEFAULT_TIMEOUT  # Transport timeout in seconds
    state_field: str = DEFAULT_STATE_FIELD  # Name of the state custom field

    def __post_init__(self) -> None:
        if not self.url or not self.url.strip():
            raise ValueError("YouTrack URL must not be empty")
        if not self.token or not self.token.strip():
            raise ValueError("YouTrack token must not be empty")
        if self.timeout <= 0:
            raise ValueError("YouTrack timeout must be positive")
        object.__setattr__(self, "url", self.url.strip().rstrip("/"))

    @property
    def api_url(self) -> str:
        """Base URL of the REST API."""
        return f"{self.url}/api"

    @classmethod
    def from_env(cls) -> "YouTrackConfig":
        """Create configuration from environment variables.

        A `.env` file in the working directory is loaded first; variables
        already set in the environment win.

        Returns:
            YouTrackConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        load_dotenv(override=False)

        url = os.getenv(ENV_YOUTRACK_URL)
        if not url:
            raise ValueError(f"Missing required {ENV_YOUTRACK_URL} environment variable")

        token = os.getenv(ENV_YOUTRACK_TOKEN)
        if not token:
            raise ValueError(
                f"Missing required {ENV_YOUTRACK_TOKEN} environment variable"
            )

        return cls(
            url=url,
            token=token,
            ssl_verify=is_env_ssl_verify(ENV_YOUTRACK_SSL_VERIFY),
            timeout=get_env_float(ENV_YOUTRACK_TIMEOUT, DEFAULT_TIMEOUT),
            state_field=os.getenv(ENV_YOUTRACK_STATE_FIELD) or DEFAULT_STATE_FIELD,
        )

    def __repr__(self) -> str:
        return (
            f"YouTrackConfig(url={self.url!r}, token='***', "
            f"ssl_verify={self.ssl_verify}, timeout={self.timeout}, "
            f"state_field={self.state_field!r})"
        )
