"""Pure construction of workflow dispatch requests.

The input names `commit_sha` and `target` must match the inputs declared by the
remote workflow; a mismatch only shows up when GitHub rejects the dispatch.
"""

from types import MappingProxyType

from prdispatch.gateway.github.types import CommitRef, DispatchRequest, GitHubRepoId

COMMIT_SHA_INPUT = "commit_sha"
TARGET_INPUT = "target"

# Deployment environments are experimental1..experimentalN
MIN_ENVIRONMENT = 1
MAX_ENVIRONMENT = 6
ENVIRONMENT_PREFIX = "experimental"


def environment_label(number: int) -> str:
    """Map a one-based environment number to its `target` label.

    Raises:
        ValueError: If number is outside MIN_ENVIRONMENT..MAX_ENVIRONMENT
    """
    if not MIN_ENVIRONMENT <= number <= MAX_ENVIRONMENT:
        msg = f"Environment must be between {MIN_ENVIRONMENT} and {MAX_ENVIRONMENT}"
        raise ValueError(msg)
    return f"{ENVIRONMENT_PREFIX}{number}"


def environment_options() -> list[str]:
    """Labels for every environment, in menu order (index i is number i + 1)."""
    return [environment_label(n) for n in range(MIN_ENVIRONMENT, MAX_ENVIRONMENT + 1)]


def build_dispatch_inputs(branch: str, commit: CommitRef, environment: str) -> dict[str, str]:
    """Build the workflow inputs for a dispatch.

    Args:
        branch: Head branch of the selected pull request
        commit: Most recent commit on that branch
        environment: Environment label sent as `target`

    Returns:
        Mapping with exactly the keys `commit_sha` and `target`

    Raises:
        ValueError: If branch, short sha or environment is empty
    """
    if not branch:
        raise ValueError("Branch name must not be empty")
    if not commit.short_sha:
        raise ValueError("Commit sha must not be empty")
    if not environment:
        raise ValueError("Environment label must not be empty")
    return {COMMIT_SHA_INPUT: commit.short_sha, TARGET_INPUT: environment}


def build_dispatch_request(
    repo_id: GitHubRepoId,
    *,
    workflow_id: str,
    branch: str,
    commit: CommitRef,
    environment: str,
) -> DispatchRequest:
    """Build the immutable DispatchRequest sent to the workflow dispatch endpoint."""
    inputs = build_dispatch_inputs(branch, commit, environment)
    return DispatchRequest(
        repo_id=repo_id,
        workflow_id=workflow_id,
        git_ref=branch,
        inputs=MappingProxyType(inputs),
    )
