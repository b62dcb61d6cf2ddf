"""YouTrack issue-tracker adapter for MCP servers."""

from .logging_config import log_operation, setup_logger
from .utils.env import is_env_truthy

__version__ = "0.1.0"

logger = setup_logger(log_to_file=is_env_truthy("YOUTRACK_LOG_TO_FILE"))

with log_operation(logger, "initialization"):
    logger.debug(f"Initializing MCP YouTrack {__version__}")

from .youtrack import YouTrackConfig, YouTrackFetcher  # noqa: E402

__all__ = ["YouTrackConfig", "YouTrackFetcher", "__version__"]
