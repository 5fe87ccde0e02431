"""Fake HTTP client for testing."""

import threading
from dataclasses import dataclass
from typing import Any

from prdispatch.gateway.http.abc import GitHubApiError, HttpClient


@dataclass(frozen=True)
class RecordedRequest:
    """A request made against FakeHttpClient."""

    method: str
    endpoint: str
    params: dict[str, str] | None
    data: dict[str, Any] | None


class FakeHttpClient(HttpClient):
    """In-memory HTTP client returning canned responses per endpoint.

    Endpoints without a configured response return an empty dict. Requests are
    recorded in call order, including requests that raised.
    """

    def __init__(self) -> None:
        self._responses: dict[str, Any] = {}
        self._errors: dict[str, GitHubApiError] = {}
        self._requests: list[RecordedRequest] = []
        self._lock = threading.Lock()

    def set_response(self, endpoint: str, *, response: Any) -> None:
        """Configure the decoded body returned for an endpoint."""
        self._responses[endpoint] = response

    def set_error(self, endpoint: str, *, status_code: int | None, detail: str) -> None:
        """Make every request to an endpoint raise GitHubApiError."""
        self._errors[endpoint] = GitHubApiError(endpoint, status_code, detail)

    def get(self, endpoint: str, *, params: dict[str, str] | None = None) -> Any:
        return self._handle("GET", endpoint, params=params, data=None)

    def post(self, endpoint: str, *, data: dict[str, Any]) -> Any:
        return self._handle("POST", endpoint, params=None, data=data)

    def _handle(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, str] | None,
        data: dict[str, Any] | None,
    ) -> Any:
        with self._lock:
            self._requests.append(RecordedRequest(method, endpoint, params, data))
        if endpoint in self._errors:
            raise self._errors[endpoint]
        return self._responses.get(endpoint, {})

    @property
    def requests(self) -> list[RecordedRequest]:
        """Read-only access to recorded requests for test assertions."""
        return list(self._requests)
