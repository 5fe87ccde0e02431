"""Production implementation of GitHub authentication operations."""

from prdispatch.gateway.github.auth.abc import GitHubAuthGateway
from prdispatch.gateway.http.abc import HttpClient


class RealGitHubAuthGateway(GitHubAuthGateway):
    """Production implementation using the REST `user` endpoint."""

    def __init__(self, http_client: HttpClient) -> None:
        self._http_client = http_client

    def get_current_user(self) -> str:
        response = self._http_client.get("user")
        return str(response["login"])
