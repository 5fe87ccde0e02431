"""Application context with dependency injection."""

from dataclasses import dataclass

from prdispatch.core.config import DispatchConfig
from prdispatch.gateway.github.auth.real import RealGitHubAuthGateway
from prdispatch.gateway.github.gateway import GitHubGateway, create_fake_github_gateway
from prdispatch.gateway.github.pr.real import RealGitHubPrGateway
from prdispatch.gateway.github.repo.real import RealGitHubRepoGateway
from prdispatch.gateway.github.workflow.abc import GitHubWorkflowGateway
from prdispatch.gateway.github.workflow.dry_run import DryRunGitHubWorkflowGateway
from prdispatch.gateway.github.workflow.real import RealGitHubWorkflowGateway
from prdispatch.gateway.http.abc import HttpClient
from prdispatch.gateway.prompt.abc import Prompter
from prdispatch.gateway.prompt.real import RealPrompter


@dataclass(frozen=True)
class DispatchContext:
    """Immutable context holding all dependencies for a dispatch.

    Created at CLI entry point and threaded through the pipeline.
    Frozen to prevent accidental modification at runtime.
    """

    config: DispatchConfig
    github: GitHubGateway
    prompter: Prompter
    dry_run: bool

    @staticmethod
    def for_test(
        *,
        config: DispatchConfig | None = None,
        github: GitHubGateway | None = None,
        prompter: Prompter | None = None,
        dry_run: bool = False,
    ) -> "DispatchContext":
        """Create a context populated with fakes.

        Args:
            config: Optional config. Defaults to owner/repo "acme"/"service"
                with no static workflow id.
            github: Optional gateway. Defaults to create_fake_github_gateway().
            prompter: Optional prompter. Defaults to a FakePrompter that
                always accepts the default.
            dry_run: Dry-run flag recorded in the context
        """
        from prdispatch.gateway.prompt.fake import FakePrompter

        return DispatchContext(
            config=config
            or DispatchConfig(token="test-token", owner="acme", repo="service", workflow_id=None),
            github=github or create_fake_github_gateway(),
            prompter=prompter or FakePrompter(),
            dry_run=dry_run,
        )


def create_context(
    config: DispatchConfig, *, http_client: HttpClient, dry_run: bool
) -> DispatchContext:
    """Create production context with real implementations.

    The one http_client is shared by every sub-gateway, including calls made
    from the background pull request fetch. The caller owns it and closes it.

    Args:
        config: Loaded configuration
        http_client: Client for the GitHub REST API, usually a RealHttpClient
        dry_run: If True, wrap the workflow gateway so dispatches are printed
                 instead of sent
    """
    workflow: GitHubWorkflowGateway = RealGitHubWorkflowGateway(http_client)
    if dry_run:
        workflow = DryRunGitHubWorkflowGateway(workflow)

    github = GitHubGateway(
        auth=RealGitHubAuthGateway(http_client),
        pr=RealGitHubPrGateway(http_client),
        repo=RealGitHubRepoGateway(http_client),
        workflow=workflow,
    )
    return DispatchContext(
        config=config,
        github=github,
        prompter=RealPrompter(),
        dry_run=dry_run,
    )
