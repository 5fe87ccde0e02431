"""Production implementation of GitHub repository content operations."""

from prdispatch.gateway.github.repo.abc import GitHubRepoGateway
from prdispatch.gateway.github.types import CommitRef, GitHubRepoId
from prdispatch.gateway.http.abc import HttpClient


class RealGitHubRepoGateway(GitHubRepoGateway):
    """Production implementation using the REST commits endpoint."""

    def __init__(self, http_client: HttpClient) -> None:
        self._http_client = http_client

    def list_commits(self, repo_id: GitHubRepoId, branch: str) -> list[CommitRef]:
        response = self._http_client.get(
            f"repos/{repo_id.owner}/{repo_id.repo}/commits",
            params={"sha": branch},
        )
        return [CommitRef.from_sha(str(item["sha"])) for item in response or []]
