"""Abstract HTTP client for direct GitHub REST API calls."""

from abc import ABC, abstractmethod
from typing import Any


class GitHubApiError(RuntimeError):
    """A GitHub API call failed.

    Attributes:
        operation: Human-readable description of the request that failed
        status_code: HTTP status code, or None for transport errors
        detail: Error message returned by the API or the transport
    """

    def __init__(self, operation: str, status_code: int | None, detail: str) -> None:
        if status_code is None:
            msg = f"Failed to {operation}: {detail}"
        else:
            msg = f"Failed to {operation} (HTTP {status_code}): {detail}"
        super().__init__(msg)
        self.operation = operation
        self.status_code = status_code
        self.detail = detail


class HttpClient(ABC):
    """Abstract interface for authenticated GitHub REST API requests.

    Endpoints are relative to the API base URL (e.g. "repos/owner/repo/pulls/1").
    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get(self, endpoint: str, *, params: dict[str, str] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body.

        Args:
            endpoint: API path relative to the base URL
            params: Optional query string parameters

        Returns:
            Decoded JSON body

        Raises:
            GitHubApiError: If the request fails or returns a non-2xx status
        """
        ...

    @abstractmethod
    def post(self, endpoint: str, *, data: dict[str, Any]) -> Any:
        """Send a POST request with a JSON body.

        Args:
            endpoint: API path relative to the base URL
            data: JSON-serializable request body

        Returns:
            Decoded JSON body, or None when the response has no content

        Raises:
            GitHubApiError: If the request fails or returns a non-2xx status
        """
        ...
