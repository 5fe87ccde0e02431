"""Composite gateway for GitHub operations."""

from dataclasses import dataclass

from prdispatch.gateway.github.auth.abc import GitHubAuthGateway
from prdispatch.gateway.github.pr.abc import GitHubPrGateway
from prdispatch.gateway.github.repo.abc import GitHubRepoGateway
from prdispatch.gateway.github.workflow.abc import GitHubWorkflowGateway


@dataclass(frozen=True)
class GitHubGateway:
    """Composite gateway providing access to all GitHub sub-gateways.

    Operations are grouped the way the REST API groups them (auth, pr, repo,
    workflow). Each sub-gateway call is a single round trip: no retries and no
    caching.

    Usage:
        ctx.github.auth.get_current_user()
        ctx.github.pr.search_open_pull_requests(...)
        ctx.github.repo.list_commits(...)
        ctx.github.workflow.dispatch_workflow(...)
    """

    auth: GitHubAuthGateway
    pr: GitHubPrGateway
    repo: GitHubRepoGateway
    workflow: GitHubWorkflowGateway


def create_fake_github_gateway(
    *,
    auth: GitHubAuthGateway | None = None,
    pr: GitHubPrGateway | None = None,
    repo: GitHubRepoGateway | None = None,
    workflow: GitHubWorkflowGateway | None = None,
) -> GitHubGateway:
    """Create a GitHubGateway with fake sub-gateways for testing.

    Provide custom sub-gateways to override the defaults.

    Example:
        >>> from prdispatch.gateway.github.workflow.fake import FakeGitHubWorkflowGateway
        >>> workflow = FakeGitHubWorkflowGateway()
        >>> github = create_fake_github_gateway(workflow=workflow)
        >>> # Later: assert len(workflow.dispatched) == 1
    """
    from prdispatch.gateway.github.auth.fake import FakeGitHubAuthGateway
    from prdispatch.gateway.github.pr.fake import FakeGitHubPrGateway
    from prdispatch.gateway.github.repo.fake import FakeGitHubRepoGateway
    from prdispatch.gateway.github.workflow.fake import FakeGitHubWorkflowGateway

    return GitHubGateway(
        auth=auth or FakeGitHubAuthGateway(),
        pr=pr or FakeGitHubPrGateway(),
        repo=repo or FakeGitHubRepoGateway(),
        workflow=workflow or FakeGitHubWorkflowGateway(),
    )
