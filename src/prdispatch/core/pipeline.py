"""Fetch-and-select pipeline that ends in one workflow dispatch.

Sequence: resolve identity, then fetch candidate pull requests in the
background while the user picks an environment, then pick a pull request,
resolve its latest commit, resolve the workflow, and dispatch exactly once.

The background fetch is the only concurrent step. It is submitted to a
single-worker executor and joined with future.result() after the environment
prompt returns; the executor context also waits for it when the prompt raises.
"""

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from prdispatch.core.context import DispatchContext
from prdispatch.core.errors import (
    AuthenticationFailed,
    DispatchError,
    EmptyResult,
    NoCandidates,
    RemoteRequestFailed,
)
from prdispatch.core.payload import (
    build_dispatch_request,
    environment_label,
    environment_options,
)
from prdispatch.gateway.github.gateway import GitHubGateway
from prdispatch.gateway.github.types import (
    CommitRef,
    DispatchRequest,
    GitHubRepoId,
    PullRequestCandidate,
)
from prdispatch.gateway.http.abc import GitHubApiError
from prdispatch.output.output import user_output

logger = logging.getLogger(__name__)

FETCH_PULL_REQUESTS = "fetch pull requests"
LIST_COMMITS = "list commits"
FETCH_WORKFLOWS = "fetch workflows"
DISPATCH_WORKFLOW = "dispatch workflow"


@dataclass(frozen=True)
class DispatchOutcome:
    """What was dispatched, for the final report."""

    pull_request: PullRequestCandidate
    commit: CommitRef
    environment: str
    request: DispatchRequest

    @property
    def branch(self) -> str:
        return self.pull_request.branch_ref


def run_dispatch(
    ctx: DispatchContext, *, environment: int | None
) -> DispatchOutcome | NoCandidates:
    """Run the full pipeline and dispatch at most one workflow run.

    Args:
        ctx: Context holding config, GitHub gateway and prompter
        environment: One-based environment number from the command line, or
            None to ask the user

    Returns:
        DispatchOutcome after a successful dispatch, or NoCandidates when the
        user has no open pull requests (nothing is dispatched)

    Raises:
        AuthenticationFailed: If the identity lookup is rejected
        RemoteRequestFailed: If a search, list or dispatch call fails
        EmptyResult: If the branch has no commits or the repo has no workflows
        DispatchError: If the selected pull request cannot form a dispatch request
        UserCancelled: If the user aborts a prompt
    """
    repo_id = ctx.config.repo_id

    user_output("Authenticating with GitHub...")
    identity = resolve_identity(ctx.github)
    user_output(f"Authenticated as: {identity}")

    user_output(f"Fetching PRs from {repo_id.slug}...")
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="prdispatch-fetch") as executor:
        candidates_future: Future[list[PullRequestCandidate]] = executor.submit(
            fetch_candidates, ctx.github, repo_id, identity
        )
        target = select_environment(ctx, environment)
        candidates = candidates_future.result()

    if not candidates:
        return NoCandidates(owner=repo_id.owner, repo=repo_id.repo, author=identity)

    selection = ctx.prompter.select(
        "Select a PR",
        [candidate.label for candidate in candidates],
        default=0,
    )
    pull_request = candidates[selection]
    branch = pull_request.branch_ref

    commit = resolve_latest_commit(ctx.github, repo_id, branch)

    user_output(f"Branch: {branch}")
    user_output(f"Commit: {commit.short_sha}")
    user_output(f"Environment: {target}")

    workflow_id = resolve_workflow_id(ctx)
    try:
        request = build_dispatch_request(
            repo_id,
            workflow_id=workflow_id,
            branch=branch,
            commit=commit,
            environment=target,
        )
    except ValueError as e:
        raise DispatchError(
            f"Cannot build dispatch request for PR #{pull_request.number}: {e}",
            hint="Please check the pull request head branch on GitHub",
        ) from e

    user_output(f"Sending request with payload: {json.dumps(request.payload(), indent=2)}")
    try:
        ctx.github.workflow.dispatch_workflow(request)
    except GitHubApiError as e:
        raise RemoteRequestFailed(
            DISPATCH_WORKFLOW,
            f"Failed to trigger workflow: {e}",
            hint="Please check workflow inputs match your workflow file.",
        ) from e

    return DispatchOutcome(
        pull_request=pull_request,
        commit=commit,
        environment=target,
        request=request,
    )


def resolve_identity(github: GitHubGateway) -> str:
    """Look up the login the token belongs to. Authentication is never retried."""
    try:
        return github.auth.get_current_user()
    except GitHubApiError as e:
        raise AuthenticationFailed(
            f"Failed to fetch current user: {e.detail}",
            hint="Please check your GitHub token has correct permissions",
        ) from e


def fetch_candidates(
    github: GitHubGateway, repo_id: GitHubRepoId, identity: str
) -> list[PullRequestCandidate]:
    """Find open pull requests authored by identity, in search order.

    Runs on the background worker. Hits whose detail lookup fails are dropped;
    a failed search fails the whole fetch.

    Raises:
        RemoteRequestFailed: If the search request fails
    """
    try:
        hits = github.pr.search_open_pull_requests(repo_id, author=identity)
    except GitHubApiError as e:
        raise RemoteRequestFailed(
            FETCH_PULL_REQUESTS,
            f"Failed to fetch PRs: {e}",
            hint="Please check repository name and permissions",
        ) from e

    candidates: list[PullRequestCandidate] = []
    for hit in hits:
        if hit.author != identity:
            logger.debug("Skipping PR #%d authored by %s", hit.number, hit.author)
            continue
        try:
            candidates.append(github.pr.get_pull_request(repo_id, hit.number))
        except GitHubApiError as e:
            logger.debug("Dropping PR #%d: %s", hit.number, e)
    return candidates


def select_environment(ctx: DispatchContext, environment: int | None) -> str:
    """Bind the environment label, prompting when none was given."""
    if environment is not None:
        return environment_label(environment)
    options = environment_options()
    selection = ctx.prompter.select("Select environment", options, default=0)
    return options[selection]


def resolve_latest_commit(github: GitHubGateway, repo_id: GitHubRepoId, branch: str) -> CommitRef:
    """Return the most recent commit on branch.

    Raises:
        RemoteRequestFailed: If the commit listing fails
        EmptyResult: If the branch has no commits or the latest one has no sha
    """
    try:
        commits = github.repo.list_commits(repo_id, branch)
    except GitHubApiError as e:
        raise RemoteRequestFailed(
            LIST_COMMITS,
            f"Failed to list commits on branch '{branch}': {e}",
            hint="Please check the branch still exists on the remote",
        ) from e
    if not commits:
        raise EmptyResult(f"No commits found on branch '{branch}'")
    latest = commits[0]
    if not latest.full_sha:
        raise EmptyResult(f"Latest commit on branch '{branch}' has no sha")
    return latest


def resolve_workflow_id(ctx: DispatchContext) -> str:
    """Use the configured workflow id, or let the user pick a remote workflow."""
    if ctx.config.workflow_id is not None:
        user_output(f"Using configured workflow ID: {ctx.config.workflow_id}")
        return ctx.config.workflow_id

    repo_id = ctx.config.repo_id
    try:
        workflows = ctx.github.workflow.list_workflows(repo_id)
    except GitHubApiError as e:
        raise RemoteRequestFailed(
            FETCH_WORKFLOWS,
            f"Failed to fetch workflows: {e}",
            hint="Please check your GitHub token can read Actions workflows",
        ) from e
    if not workflows:
        raise EmptyResult(f"No workflows found in {repo_id.slug}")

    user_output("\nAvailable workflows:")
    for workflow in workflows:
        user_output(f"ID: {workflow.id}, Name: {workflow.name}, File: {workflow.path}")

    selection = ctx.prompter.select(
        "Select workflow to run",
        [workflow.label for workflow in workflows],
        default=0,
    )
    selected = workflows[selection]
    user_output(f"Triggering workflow: {selected.name} (ID: {selected.id})")
    return selected.id
