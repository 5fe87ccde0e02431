"""Abstract base class for GitHub pull request operations."""

from abc import ABC, abstractmethod

from prdispatch.gateway.github.types import (
    GitHubRepoId,
    PullRequestCandidate,
    PullRequestSearchHit,
)


class GitHubPrGateway(ABC):
    """Abstract interface for GitHub pull request operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def search_open_pull_requests(
        self, repo_id: GitHubRepoId, *, author: str
    ) -> list[PullRequestSearchHit]:
        """Search open pull requests authored by a user in one repository.

        Args:
            repo_id: Repository to search
            author: GitHub login of the pull request author

        Returns:
            Matching pull requests in the order the search API returned them

        Raises:
            GitHubApiError: If the search request fails
        """
        ...

    @abstractmethod
    def get_pull_request(self, repo_id: GitHubRepoId, number: int) -> PullRequestCandidate:
        """Fetch full pull request detail, including its head branch.

        Args:
            repo_id: Repository containing the pull request
            number: Pull request number

        Returns:
            PullRequestCandidate with title and head branch

        Raises:
            GitHubApiError: If the request fails
        """
        ...
