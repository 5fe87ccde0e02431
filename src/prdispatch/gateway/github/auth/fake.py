"""Fake GitHub authentication operations for testing."""

from prdispatch.gateway.github.auth.abc import GitHubAuthGateway
from prdispatch.gateway.http.abc import GitHubApiError


class FakeGitHubAuthGateway(GitHubAuthGateway):
    """In-memory fake implementation of GitHub authentication operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(self, *, username: str = "test-user", authenticated: bool = True) -> None:
        """Create FakeGitHubAuthGateway with pre-configured state.

        Args:
            username: Login returned by get_current_user()
            authenticated: If False, get_current_user() raises a 401 GitHubApiError
        """
        self._username = username
        self._authenticated = authenticated
        self._get_current_user_calls: list[None] = []

    def get_current_user(self) -> str:
        self._get_current_user_calls.append(None)
        if not self._authenticated:
            raise GitHubApiError("GET user", 401, "Bad credentials")
        return self._username

    @property
    def get_current_user_calls(self) -> list[None]:
        """Get the list of get_current_user() calls that were made."""
        return self._get_current_user_calls
