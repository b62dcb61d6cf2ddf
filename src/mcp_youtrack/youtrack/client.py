"""YouTrack REST API client."""

import logging
from dataclasses import dataclass, field
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from ..exceptions import (
    YouTrackApiError,
    YouTrackAuthenticationError,
    YouTrackDecodeError,
    YouTrackTransportError,
)
from .config import YouTrackConfig
from .constants import ERROR_BODY_LIMIT, TOTAL_COUNT_HEADER

logger = logging.getLogger("mcp-youtrack.client")

JSON_CONTENT_TYPE = "application/json"


def path_segment(value: str) -> str:
    """Quote a caller-supplied value for use as one URL path segment."""
    return quote(str(value), safe="")


@dataclass(frozen=True)
class YouTrackPage:
    """One page of raw items from an offset/limit list endpoint.

    `offset` and `limit` echo the values the page was requested with, so a
    caller holding only the page knows where it sits in the listing.

    `next_offset` is set when the page came back full, meaning more items
    may follow. A result count that is an exact multiple of `limit` costs
    one extra, empty fetch to discover the end.
    """

    items: list[dict[str, Any]] = field(default_factory=list)
    offset: int = 0
    limit: int = 0
    next_offset: int | None = None
    total: int | None = None


class YouTrackClient:
    """Client for the YouTrack REST API.

    Every call is a single synchronous request. The client keeps no state
    besides its configuration and HTTP session, so one instance may be
    shared between threads.
    """

    def __init__(self, config: YouTrackConfig) -> None:
        """Initialize YouTrack client.

        Args:
            config: YouTrack configuration
        """
        self.config = config
        self.base_url = config.api_url
        self.session = self._create_session()

    def _create_session(self) -> httpx.Client:
        """Create HTTP session with bearer authentication.

        Returns:
            Authenticated HTTP session
        """
        return httpx.Client(
            headers={
                "Authorization": f"Bearer {self.config.token}",
                "Accept": JSON_CONTENT_TYPE,
                "Content-Type": JSON_CONTENT_TYPE,
            },
            verify=self.config.ssl_verify,
            timeout=self.config.timeout,
        )

    def get(
        self,
        path: str,
        *,
        fields: str,
        action: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send GET request for a single entity.

        Args:
            path: API endpoint path (without base URL)
            fields: Field selector sent as the `fields` query parameter
            action: Description of the operation, used in errors
            params: Additional query parameters

        Returns:
            JSON object from the response

        Raises:
            YouTrackApiError: If the request fails or the body is not an object
        """
        data = self._request(
            "GET", path, action=action, params=self._with_fields(fields, params)
        )
        return self._expect_object(data, action)

    def post(
        self,
        path: str,
        *,
        fields: str,
        action: str,
        json: dict[str, Any],
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send POST request and return the resulting entity.

        Args:
            path: API endpoint path (without base URL)
            fields: Field selector sent as the `fields` query parameter
            action: Description of the operation, used in errors
            json: JSON request body
            params: Additional query parameters

        Returns:
            JSON object from the response

        Raises:
            YouTrackApiError: If the request fails or the body is not an object
        """
        data = self._request(
            "POST",
            path,
            action=action,
            params=self._with_fields(fields, params),
            json=json,
        )
        return self._expect_object(data, action)

    def delete(self, path: str, *, action: str, fields: str | None = None) -> None:
        """Send DELETE request. The response body is not read.

        Args:
            path: API endpoint path (without base URL)
            action: Description of the operation, used in errors
            fields: Field selector, sent as the `fields` query parameter when given

        Raises:
            YouTrackApiError: If the request fails
        """
        params = self._with_fields(fields, None) if fields is not None else None
        self._request("DELETE", path, action=action, params=params, expect_body=False)

    def get_list(
        self,
        path: str,
        *,
        fields: str,
        action: str,
        params: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Send GET request for an unpaginated list.

        Raises:
            YouTrackApiError: If the request fails or the body is not a list
        """
        data = self._request(
            "GET", path, action=action, params=self._with_fields(fields, params)
        )
        return self._expect_list(data, action)

    def list_page(
        self,
        path: str,
        *,
        fields: str,
        offset: int,
        limit: int,
        action: str,
        params: dict[str, Any] | None = None,
    ) -> YouTrackPage:
        """Fetch one page of a list endpoint.

        Offset and limit are always sent explicitly as query parameters.

        Args:
            path: API endpoint path (without base URL)
            fields: Field selector sent as the `fields` query parameter
            offset: Number of items to skip
            limit: Maximum number of items to return
            action: Description of the operation, used in errors
            params: Additional query parameters

        Returns:
            The page of raw items with its continuation offset

        Raises:
            YouTrackApiError: If the request fails or the body is not a list
        """
        query = {**(params or {}), "offset": offset, "limit": limit}
        response = self._send(
            "GET", path, action=action, params=self._with_fields(fields, query)
        )
        data = self._decode(response, action)
        items = self._expect_list(data, action)

        next_offset = offset + limit if len(data) == limit else None
        logger.debug(
            f"{action}: {len(items)} items at offset {offset}, next offset {next_offset}"
        )
        return YouTrackPage(
            items=items,
            offset=offset,
            limit=limit,
            next_offset=next_offset,
            total=self._total_count(response),
        )

    def close(self) -> None:
        """Close HTTP session."""
        self.session.close()

    def __enter__(self) -> "YouTrackClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @staticmethod
    def _with_fields(fields: str, params: dict[str, Any] | None) -> dict[str, Any]:
        if not fields:
            raise ValueError("A field selector is required for YouTrack requests")
        return {**(params or {}), "fields": fields}

    def _request(
        self,
        method: str,
        path: str,
        *,
        action: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        response = self._send(method, path, action=action, params=params, json=json)
        if not expect_body:
            return None
        return self._decode(response, action)

    def _send(
        self,
        method: str,
        path: str,
        *,
        action: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug(f"Sending {method} request to {url}")

        try:
            response = self.session.request(method, url, params=params, json=json)
        except httpx.RequestError as e:
            logger.error(f"Request error for {url}: {str(e)}")
            raise YouTrackTransportError(
                f"{action} failed: request error: {str(e)}", action=action
            ) from e

        logger.debug(f"{method} {url}: {response.status_code}")
        if not response.is_success:
            self._raise_api_error(response, action)
        return response

    @staticmethod
    def _raise_api_error(response: httpx.Response, action: str) -> None:
        status = response.status_code
        body = response.text[:ERROR_BODY_LIMIT]
        logger.error(f"HTTP error {status} during {action}: {body}")

        if status in (401, 403):
            raise YouTrackAuthenticationError(
                f"{action} failed: authentication rejected ({status}). "
                "Token may be expired or invalid. Please verify credentials.",
                action=action,
                status_code=status,
                body=body,
            )
        raise YouTrackApiError(
            f"{action} failed: HTTP {status} - {body}",
            action=action,
            status_code=status,
            body=body,
        )

    @staticmethod
    def _decode(response: httpx.Response, action: str) -> Any:
        status = response.status_code
        if not response.content:
            logger.error(f"Empty response body during {action}")
            raise YouTrackDecodeError(
                f"{action} failed: empty response body",
                action=action,
                status_code=status,
            )

        body = response.text[:ERROR_BODY_LIMIT]
        content_type = response.headers.get("Content-Type", "")
        if "json" not in content_type.lower():
            logger.error(f"Unexpected content type '{content_type}' during {action}")
            raise YouTrackDecodeError(
                f"{action} failed: expected JSON, got '{content_type or 'no content type'}'",
                action=action,
                status_code=status,
                body=body,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON during {action}: {str(e)}")
            raise YouTrackDecodeError(
                f"{action} failed: invalid JSON body",
                action=action,
                status_code=status,
                body=body,
            ) from e

    @staticmethod
    def _expect_object(data: Any, action: str) -> dict[str, Any]:
        if not isinstance(data, dict):
            raise YouTrackDecodeError(
                f"{action} failed: expected a JSON object, got {type(data).__name__}",
                action=action,
            )
        return data

    @staticmethod
    def _expect_list(data: Any, action: str) -> list[dict[str, Any]]:
        if not isinstance(data, list):
            raise YouTrackDecodeError(
                f"{action} failed: expected a JSON list, got {type(data).__name__}",
                action=action,
            )
        return [item for item in data if isinstance(item, dict)]

    @staticmethod
    def _total_count(response: httpx.Response) -> int | None:
        raw = response.headers.get(TOTAL_COUNT_HEADER)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            logger.debug(f"Ignoring non-numeric {TOTAL_COUNT_HEADER}: {raw}")
            return None
