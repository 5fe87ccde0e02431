"""Shared context builders for dispatch test scenarios.

Builds a DispatchContext backed by fakes for the common two-pull-request
repository used across pipeline and CLI tests.
"""

from prdispatch.core.config import DispatchConfig
from prdispatch.core.context import DispatchContext
from prdispatch.gateway.github.auth.abc import GitHubAuthGateway
from prdispatch.gateway.github.auth.fake import FakeGitHubAuthGateway
from prdispatch.gateway.github.gateway import GitHubGateway
from prdispatch.gateway.github.pr.abc import GitHubPrGateway
from prdispatch.gateway.github.pr.fake import FakeGitHubPrGateway
from prdispatch.gateway.github.repo.abc import GitHubRepoGateway
from prdispatch.gateway.github.repo.fake import FakeGitHubRepoGateway
from prdispatch.gateway.github.types import PullRequestCandidate, WorkflowDescriptor
from prdispatch.gateway.github.workflow.abc import GitHubWorkflowGateway
from prdispatch.gateway.github.workflow.fake import FakeGitHubWorkflowGateway
from prdispatch.gateway.prompt.abc import Prompter
from prdispatch.gateway.prompt.fake import FakePrompter

USER = "octocat"
FIX_BUG_SHAS = [
    "1111111aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa",
    "2222222bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb",
]
ADD_FEAT_SHA = "abcdef0123456789abcdef0123456789abcdef01"

FIX_BUG = PullRequestCandidate(number=10, title="Fix bug", branch_ref="fix-bug", author=USER)
ADD_FEAT = PullRequestCandidate(
    number=11, title="Add feature", branch_ref="add-feat", author=USER
)
DEPLOY_WORKFLOW = WorkflowDescriptor(
    id="4242", name="Deploy experimental", path=".github/workflows/deploy.yml"
)


def build_config(*, workflow_id: str | None = "4242") -> DispatchConfig:
    return DispatchConfig(token="test-token", owner="acme", repo="service", workflow_id=workflow_id)


def build_github(
    *,
    auth: GitHubAuthGateway | None = None,
    pr: GitHubPrGateway | None = None,
    repo: GitHubRepoGateway | None = None,
    workflow: GitHubWorkflowGateway | None = None,
) -> GitHubGateway:
    """GitHubGateway for a repo where USER has PRs #10 (fix-bug) and #11 (add-feat)."""
    return GitHubGateway(
        auth=auth or FakeGitHubAuthGateway(username=USER),
        pr=pr or FakeGitHubPrGateway(pull_requests=[FIX_BUG, ADD_FEAT]),
        repo=repo
        or FakeGitHubRepoGateway(
            branch_commits={"fix-bug": FIX_BUG_SHAS, "add-feat": [ADD_FEAT_SHA]},
        ),
        workflow=workflow or FakeGitHubWorkflowGateway(workflows=[DEPLOY_WORKFLOW]),
    )


def build_dispatch_context(
    *,
    github: GitHubGateway | None = None,
    prompter: Prompter | None = None,
    workflow_id: str | None = "4242",
    dry_run: bool = False,
) -> DispatchContext:
    return DispatchContext.for_test(
        config=build_config(workflow_id=workflow_id),
        github=github or build_github(),
        prompter=prompter or FakePrompter(),
        dry_run=dry_run,
    )
