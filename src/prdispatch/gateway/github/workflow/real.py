"""Production implementation of GitHub workflow operations."""

import logging

from prdispatch.gateway.github.types import DispatchRequest, GitHubRepoId, WorkflowDescriptor
from prdispatch.gateway.github.workflow.abc import GitHubWorkflowGateway
from prdispatch.gateway.http.abc import HttpClient

logger = logging.getLogger(__name__)


class RealGitHubWorkflowGateway(GitHubWorkflowGateway):
    """Production implementation using the REST Actions endpoints."""

    def __init__(self, http_client: HttpClient) -> None:
        self._http_client = http_client

    def list_workflows(self, repo_id: GitHubRepoId) -> list[WorkflowDescriptor]:
        response = self._http_client.get(f"repos/{repo_id.owner}/{repo_id.repo}/actions/workflows")
        return [
            WorkflowDescriptor(
                id=str(item["id"]),
                name=str(item.get("name", "")),
                path=str(item.get("path", "")),
            )
            for item in response.get("workflows", [])
        ]

    def dispatch_workflow(self, request: DispatchRequest) -> None:
        repo_id = request.repo_id
        endpoint = (
            f"repos/{repo_id.owner}/{repo_id.repo}/actions/workflows/"
            f"{request.workflow_id}/dispatches"
        )
        logger.debug("dispatch_workflow: endpoint=%s ref=%s", endpoint, request.git_ref)
        self._http_client.post(endpoint, data=request.payload())
