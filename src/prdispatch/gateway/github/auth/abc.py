"""Abstract base class for GitHub authentication operations."""

from abc import ABC, abstractmethod


class GitHubAuthGateway(ABC):
    """Abstract interface for GitHub authentication operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_current_user(self) -> str:
        """Get the login of the user the token belongs to.

        Returns:
            GitHub login (e.g., "octocat")

        Raises:
            GitHubApiError: If the token is missing, expired or lacks scope
        """
        ...
