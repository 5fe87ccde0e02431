"""Fake GitHub pull request operations for testing."""

import threading

from prdispatch.gateway.github.pr.abc import GitHubPrGateway
from prdispatch.gateway.github.types import (
    GitHubRepoId,
    PullRequestCandidate,
    PullRequestSearchHit,
)
from prdispatch.gateway.http.abc import GitHubApiError


class FakeGitHubPrGateway(GitHubPrGateway):
    """In-memory fake implementation of GitHub pull request operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.

    Calls may arrive from a background thread; call tracking is lock-guarded.
    """

    def __init__(
        self,
        *,
        pull_requests: list[PullRequestCandidate] | None = None,
        search_hits: list[PullRequestSearchHit] | None = None,
        search_error: str | None = None,
        failing_details: set[int] | None = None,
    ) -> None:
        """Create FakeGitHubPrGateway with pre-configured state.

        Args:
            pull_requests: Open pull requests, in search order. Searches return
                the ones authored by the requested user, like the real API.
            search_hits: If set, returned verbatim by search_open_pull_requests()
                regardless of author
            search_error: If set, search_open_pull_requests() raises with this detail
            failing_details: PR numbers whose get_pull_request() call raises
        """
        self._pull_requests = pull_requests if pull_requests is not None else []
        self._search_hits = search_hits
        self._search_error = search_error
        self._failing_details = failing_details if failing_details is not None else set()
        self._search_calls: list[tuple[GitHubRepoId, str]] = []
        self._detail_calls: list[int] = []
        self._lock = threading.Lock()

    def search_open_pull_requests(
        self, repo_id: GitHubRepoId, *, author: str
    ) -> list[PullRequestSearchHit]:
        with self._lock:
            self._search_calls.append((repo_id, author))
        if self._search_error is not None:
            raise GitHubApiError("GET search/issues", 500, self._search_error)
        if self._search_hits is not None:
            return list(self._search_hits)
        return [
            PullRequestSearchHit(number=pr.number, title=pr.title, author=pr.author)
            for pr in self._pull_requests
            if pr.author == author
        ]

    def get_pull_request(self, repo_id: GitHubRepoId, number: int) -> PullRequestCandidate:
        with self._lock:
            self._detail_calls.append(number)
        endpoint = f"GET repos/{repo_id.owner}/{repo_id.repo}/pulls/{number}"
        if number in self._failing_details:
            raise GitHubApiError(endpoint, 502, "Bad Gateway")
        for pr in self._pull_requests:
            if pr.number == number:
                return pr
        raise GitHubApiError(endpoint, 404, "Not Found")

    @property
    def search_calls(self) -> list[tuple[GitHubRepoId, str]]:
        """Read-only access to tracked searches: (repo_id, author) tuples."""
        return list(self._search_calls)

    @property
    def detail_calls(self) -> list[int]:
        """Read-only access to PR numbers passed to get_pull_request()."""
        return list(self._detail_calls)
