"""No-op wrapper for GitHub workflow operations."""

import json

import click

from prdispatch.gateway.github.types import DispatchRequest, GitHubRepoId, WorkflowDescriptor
from prdispatch.gateway.github.workflow.abc import GitHubWorkflowGateway
from prdispatch.output.output import user_output


class DryRunGitHubWorkflowGateway(GitHubWorkflowGateway):
    """No-op wrapper for GitHub workflow operations.

    Read operations are delegated to the wrapped implementation.
    dispatch_workflow prints the request it would have sent instead of sending it.
    """

    def __init__(self, wrapped: GitHubWorkflowGateway) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real GitHubWorkflowGateway implementation to wrap
        """
        self._wrapped = wrapped

    def list_workflows(self, repo_id: GitHubRepoId) -> list[WorkflowDescriptor]:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.list_workflows(repo_id)

    def dispatch_workflow(self, request: DispatchRequest) -> None:
        """Print the dispatch instead of sending it."""
        repo_id = request.repo_id
        user_output(
            click.style("[DRY RUN] ", fg="yellow")
            + f"Would dispatch workflow {request.workflow_id} on {repo_id.slug}:"
        )
        user_output(json.dumps(request.payload(), indent=2))
