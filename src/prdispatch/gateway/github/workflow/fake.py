"""Fake GitHub workflow operations for testing."""

from prdispatch.gateway.github.types import DispatchRequest, GitHubRepoId, WorkflowDescriptor
from prdispatch.gateway.github.workflow.abc import GitHubWorkflowGateway
from prdispatch.gateway.http.abc import GitHubApiError


class FakeGitHubWorkflowGateway(GitHubWorkflowGateway):
    """In-memory fake implementation of GitHub workflow operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        workflows: list[WorkflowDescriptor] | None = None,
        list_error: str | None = None,
        dispatch_error: str | None = None,
    ) -> None:
        """Create FakeGitHubWorkflowGateway with pre-configured state.

        Args:
            workflows: Workflows returned by list_workflows()
            list_error: If set, list_workflows() raises with this detail
            dispatch_error: If set, dispatch_workflow() raises a 422 with this detail
        """
        self._workflows = workflows if workflows is not None else []
        self._list_error = list_error
        self._dispatch_error = dispatch_error
        self._list_calls: list[GitHubRepoId] = []
        self._dispatched: list[DispatchRequest] = []

    def list_workflows(self, repo_id: GitHubRepoId) -> list[WorkflowDescriptor]:
        self._list_calls.append(repo_id)
        if self._list_error is not None:
            endpoint = f"GET repos/{repo_id.owner}/{repo_id.repo}/actions/workflows"
            raise GitHubApiError(endpoint, 404, self._list_error)
        return list(self._workflows)

    def dispatch_workflow(self, request: DispatchRequest) -> None:
        """Record the dispatch in the mutation tracking list.

        Failed dispatches are recorded too, so tests can count attempts.
        """
        self._dispatched.append(request)
        if self._dispatch_error is not None:
            endpoint = f"POST actions/workflows/{request.workflow_id}/dispatches"
            raise GitHubApiError(endpoint, 422, self._dispatch_error)

    @property
    def list_calls(self) -> list[GitHubRepoId]:
        """Read-only access to tracked list_workflows() calls."""
        return self._list_calls

    @property
    def dispatched(self) -> list[DispatchRequest]:
        """Read-only access to tracked dispatches for test assertions."""
        return self._dispatched
