"""Production HTTP client backed by httpx."""

import logging
from typing import Any

import httpx

from prdispatch.gateway.http.abc import GitHubApiError, HttpClient

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"


class RealHttpClient(HttpClient):
    """Authenticated client for the GitHub REST API.

    One round trip per call: no retries and no caching. The httpx default
    timeout is disabled, so a hung request blocks the caller.

    The underlying httpx.Client is thread-safe and may be shared between the
    main flow and background fetch tasks.
    """

    def __init__(
        self,
        *,
        token: str,
        base_url: str,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create a client for the given API base URL.

        Args:
            token: GitHub personal access token
            base_url: API base URL (e.g. "https://api.github.com")
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._client = httpx.Client(
            base_url=base_url.rstrip("/") + "/",
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            },
            timeout=None,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def get(self, endpoint: str, *, params: dict[str, str] | None = None) -> Any:
        return self._request("GET", endpoint, params=params, data=None)

    def post(self, endpoint: str, *, data: dict[str, Any]) -> Any:
        return self._request("POST", endpoint, params=None, data=data)

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, str] | None,
        data: dict[str, Any] | None,
    ) -> Any:
        operation = f"{method} {endpoint}"
        logger.debug("%s params=%s", operation, params)
        try:
            response = self._client.request(method, endpoint, params=params, json=data)
        except httpx.HTTPError as e:
            raise GitHubApiError(operation, None, str(e)) from e

        logger.debug("%s -> %d", operation, response.status_code)
        if response.status_code >= 400:
            raise GitHubApiError(operation, response.status_code, _error_detail(response))

        if response.status_code == 204 or not response.content:
            return None
        return response.json()


def _error_detail(response: httpx.Response) -> str:
    """Extract the API's error message, falling back to the reason phrase."""
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase
    if isinstance(body, dict) and "message" in body:
        return str(body["message"])
    return response.reason_phrase
