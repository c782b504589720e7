"""Contentful Content Preview API client."""

from __future__ import annotations

from typing import Any

import requests

from EntrySearch.core.errors import TransportError
from EntrySearch.core.models import EntryPage
from EntrySearch.utils.log import log

DEFAULT_API_HOST = "preview.contentful.com"
DEFAULT_TIMEOUT = 30.0

HEADERS = {
    "User-Agent": "entry-search/0.1",
    "Accept": "application/json",
}


class ContentfulApiClient:
    """Low-level HTTP client for the Contentful entries endpoint.

    Requests go out one at a time and are never retried; any failure is
    raised as ``TransportError`` with the underlying exception as its cause.
    """

    def __init__(
        self,
        *,
        space_id: str,
        access_token: str,
        environment_id: str = "master",
        host: str = DEFAULT_API_HOST,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            space_id: Contentful space identifier.
            access_token: Preview API access token.
            environment_id: Environment identifier.
            host: API host name.
            timeout: Request timeout in seconds.
            session: Optional pre-built session.
        """
        self.space_id = space_id
        self.environment_id = environment_id
        self.host = host
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(HEADERS)
        self._session.headers["Authorization"] = f"Bearer {access_token}"

    @property
    def entries_url(self) -> str:
        return f"https://{self.host}/spaces/{self.space_id}/environments/{self.environment_id}/entries"

    def close(self) -> None:
        """Close the underlying HTTP session.
        """
        self._session.close()

    def fetch_entries(
        self,
        *,
        query: str,
        limit: int,
        skip: int,
        include: int = 1,
        locale: str | None = None,
    ) -> EntryPage:
        """Fetch one page of entries matching a full-text query.

        Args:
            query: Coarse, case-insensitive full-text filter.
            limit: Page size.
            skip: Number of entries to skip.
            include: Depth of linked entries to resolve.
            locale: Locale to request, or None for the API default.

        Returns:
            The page of raw entry payloads and the reported total.

        Raises:
            TransportError: If the request fails or the response is malformed.
        """
        params: dict[str, Any] = {
            "query": query,
            "limit": limit,
            "skip": skip,
            "include": include,
        }
        if locale:
            params["locale"] = locale

        log.debug("GET %s skip=%d limit=%d", self.entries_url, skip, limit)
        try:
            response = self._session.get(self.entries_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.HTTPError as error:
            status_code = getattr(error.response, "status_code", None)
            raise TransportError(
                f"Contentful request failed: HTTP {status_code}: {_error_message(error.response)}",
                status_code=status_code,
            ) from error
        except requests.JSONDecodeError as error:
            raise TransportError(f"Contentful returned invalid JSON: {error}") from error
        except requests.RequestException as error:
            raise TransportError(f"Contentful request failed: {error}") from error

        return _parse_page(payload, skip=skip, limit=limit)


def _parse_page(payload: Any, *, skip: int, limit: int) -> EntryPage:
    if not isinstance(payload, dict):
        raise TransportError("Contentful response must be a JSON object")
    items = payload.get("items", [])
    total = payload.get("total", 0)
    if not isinstance(items, list):
        raise TransportError("Contentful response field 'items' must be a list")
    if isinstance(total, bool) or not isinstance(total, int):
        raise TransportError("Contentful response field 'total' must be an integer")
    return EntryPage(items=items, total=total, skip=skip, limit=limit)


def _error_message(response: requests.Response | None) -> str:
    """Extract the API error message from an error response."""
    if response is None:
        return "no response"
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or ""
