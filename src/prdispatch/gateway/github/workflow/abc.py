"""Abstract base class for GitHub workflow operations."""

from abc import ABC, abstractmethod

from prdispatch.gateway.github.types import DispatchRequest, GitHubRepoId, WorkflowDescriptor


class GitHubWorkflowGateway(ABC):
    """Abstract interface for GitHub Actions workflow operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def list_workflows(self, repo_id: GitHubRepoId) -> list[WorkflowDescriptor]:
        """List the workflows registered in a repository.

        Args:
            repo_id: Repository to list workflows for

        Returns:
            Workflows in the order the API returned them

        Raises:
            GitHubApiError: If the request fails
        """
        ...

    @abstractmethod
    def dispatch_workflow(self, request: DispatchRequest) -> None:
        """Trigger a workflow_dispatch run.

        Fire-and-forget: GitHub does not return the created run.

        Args:
            request: Workflow id, git ref and inputs to send

        Raises:
            GitHubApiError: If GitHub rejects the dispatch (e.g. the inputs do
                not match the workflow's declared inputs)
        """
        ...
