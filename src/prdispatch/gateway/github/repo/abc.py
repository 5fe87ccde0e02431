"""Abstract base class for GitHub repository content operations."""

from abc import ABC, abstractmethod

from prdispatch.gateway.github.types import CommitRef, GitHubRepoId


class GitHubRepoGateway(ABC):
    """Abstract interface for GitHub repository content operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def list_commits(self, repo_id: GitHubRepoId, branch: str) -> list[CommitRef]:
        """List commits reachable from a branch, most recent first.

        Args:
            repo_id: Repository containing the branch
            branch: Branch name

        Returns:
            Commits ordered most recent first (possibly empty)

        Raises:
            GitHubApiError: If the request fails
        """
        ...
