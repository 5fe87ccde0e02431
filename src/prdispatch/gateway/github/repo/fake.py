"""Fake GitHub repository content operations for testing."""

from prdispatch.gateway.github.repo.abc import GitHubRepoGateway
from prdispatch.gateway.github.types import CommitRef, GitHubRepoId
from prdispatch.gateway.http.abc import GitHubApiError


class FakeGitHubRepoGateway(GitHubRepoGateway):
    """In-memory fake implementation of GitHub repository content operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        branch_commits: dict[str, list[str]] | None = None,
        list_commits_error: str | None = None,
    ) -> None:
        """Create FakeGitHubRepoGateway with pre-configured state.

        Args:
            branch_commits: Mapping of branch name to full commit shas, most
                recent first. Unknown branches have no commits.
            list_commits_error: If set, list_commits() raises with this detail
        """
        self._branch_commits = branch_commits if branch_commits is not None else {}
        self._list_commits_error = list_commits_error
        self._list_commits_calls: list[str] = []

    def list_commits(self, repo_id: GitHubRepoId, branch: str) -> list[CommitRef]:
        self._list_commits_calls.append(branch)
        if self._list_commits_error is not None:
            endpoint = f"GET repos/{repo_id.owner}/{repo_id.repo}/commits"
            raise GitHubApiError(endpoint, 404, self._list_commits_error)
        return [CommitRef.from_sha(sha) for sha in self._branch_commits.get(branch, [])]

    @property
    def list_commits_calls(self) -> list[str]:
        """Read-only access to branches passed to list_commits()."""
        return self._list_commits_calls
