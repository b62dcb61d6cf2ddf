class MCPYouTrackError(Exception):
    """Base exception for MCP-YouTrack errors."""

    pass


class YouTrackApiError(MCPYouTrackError):
    """Raised when a YouTrack API call fails.

    Carries the action being performed, the HTTP status code (None when the
    request never produced a response) and a truncated response body.
    """

    def __init__(
        self,
        message: str,
        action: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.action = action
        self.status_code = status_code
        self.body = body


class YouTrackAuthenticationError(YouTrackApiError):
    """Raised when YouTrack rejects the credentials (401/403)."""

    pass


class YouTrackTransportError(YouTrackApiError):
    """Raised when the request could not be sent or no response arrived."""

    pass


class YouTrackDecodeError(YouTrackApiError):
    """Raised when a response body is absent, not JSON, or the wrong shape."""

    pass


class YouTrackPreconditionError(MCPYouTrackError):
    """Raised when an operation's precondition does not hold."""

    pass


class TagNotFoundError(YouTrackPreconditionError):
    """Raised when a tag to remove is not present on the issue."""

    def __init__(self, issue_id: str, tag: str) -> None:
        super().__init__(f"Tag '{tag}' not found on {issue_id}")
        self.issue_id = issue_id
        self.tag = tag
