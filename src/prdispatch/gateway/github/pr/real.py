"""Production implementation of GitHub pull request operations."""

from prdispatch.gateway.github.pr.abc import GitHubPrGateway
from prdispatch.gateway.github.types import (
    GitHubRepoId,
    PullRequestCandidate,
    PullRequestSearchHit,
)
from prdispatch.gateway.http.abc import GitHubApiError, HttpClient

# Search API page size upper bound
SEARCH_PAGE_SIZE = 100


class RealGitHubPrGateway(GitHubPrGateway):
    """Production implementation using the REST search and pulls endpoints."""

    def __init__(self, http_client: HttpClient) -> None:
        self._http_client = http_client

    def search_open_pull_requests(
        self, repo_id: GitHubRepoId, *, author: str
    ) -> list[PullRequestSearchHit]:
        """Search open pull requests via the issue search API.

        The search API returns issues and pull requests through the same
        endpoint; the `is:pr` qualifier restricts it to pull requests. Only the
        first page is read.
        """
        query = f"is:pr is:open author:{author} repo:{repo_id.slug}"
        response = self._http_client.get(
            "search/issues",
            params={"q": query, "per_page": str(SEARCH_PAGE_SIZE)},
        )
        return [
            PullRequestSearchHit(
                number=int(item["number"]),
                title=item.get("title"),
                author=_login(item),
            )
            for item in response.get("items", [])
        ]

    def get_pull_request(self, repo_id: GitHubRepoId, number: int) -> PullRequestCandidate:
        """Fetch one pull request and read its head branch.

        Raises:
            GitHubApiError: If the request fails or the body lacks a head branch
        """
        endpoint = f"repos/{repo_id.owner}/{repo_id.repo}/pulls/{number}"
        response = self._http_client.get(endpoint)
        try:
            branch_ref = response["head"]["ref"]
            candidate_number = int(response["number"])
        except (KeyError, TypeError, ValueError) as e:
            raise GitHubApiError(f"GET {endpoint}", None, f"Malformed pull request: {e!r}") from e
        if not branch_ref:
            raise GitHubApiError(f"GET {endpoint}", None, "Pull request has no head branch")
        return PullRequestCandidate(
            number=candidate_number,
            title=response.get("title"),
            branch_ref=str(branch_ref),
            author=_login(response),
        )


def _login(item: dict) -> str:
    user = item.get("user") or {}
    return str(user.get("login", ""))
