"""Runtime configuration loaded from environment variables."""

from collections.abc import Mapping
from dataclasses import dataclass

from prdispatch.core.errors import ConfigurationMissing
from prdispatch.gateway.github.types import GitHubRepoId

TOKEN_VAR = "GITHUB_TOKEN"
ORG_VAR = "GITHUB_ORG"
REPO_VAR = "GITHUB_REPO"
WORKFLOW_ID_VAR = "DEPLOY_EXPERIMENTAL_WORKFLOW_ID"
API_URL_VAR = "GITHUB_API_URL"

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class DispatchConfig:
    """In-memory representation of the dispatch settings.

    Built once at startup and passed to the pipeline through the context;
    pipeline code never reads the process environment itself.
    """

    token: str
    owner: str
    repo: str
    workflow_id: str | None  # None = pick a workflow interactively
    api_url: str = DEFAULT_API_URL

    @property
    def repo_id(self) -> GitHubRepoId:
        return GitHubRepoId(owner=self.owner, repo=self.repo)


def load_config(environ: Mapping[str, str]) -> DispatchConfig:
    """Build DispatchConfig from environment variables.

    Example environment:
      GITHUB_TOKEN=ghp_...
      GITHUB_ORG=acme
      GITHUB_REPO=service
      # Optional: skip the workflow menu
      DEPLOY_EXPERIMENTAL_WORKFLOW_ID=12345678

    Raises:
        ConfigurationMissing: If any required variable is unset or blank
    """
    values = {name: environ.get(name, "").strip() for name in (TOKEN_VAR, ORG_VAR, REPO_VAR)}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigurationMissing(missing)

    workflow_id = environ.get(WORKFLOW_ID_VAR, "").strip() or None
    api_url = environ.get(API_URL_VAR, "").strip() or DEFAULT_API_URL
    return DispatchConfig(
        token=values[TOKEN_VAR],
        owner=values[ORG_VAR],
        repo=values[REPO_VAR],
        workflow_id=workflow_id,
        api_url=api_url,
    )
