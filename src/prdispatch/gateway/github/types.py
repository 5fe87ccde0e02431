"""Type definitions for GitHub operations."""

from collections.abc import Mapping
from dataclasses import dataclass

SHORT_SHA_LENGTH = 7


@dataclass(frozen=True)
class GitHubRepoId:
    """Owner/repo pair identifying a GitHub repository."""

    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class PullRequestSearchHit:
    """Pull request as returned by the issue search API.

    The search API does not return the head branch, so hits have to be
    resolved into PullRequestCandidate via a detail lookup.
    """

    number: int
    title: str | None
    author: str


@dataclass(frozen=True)
class PullRequestCandidate:
    """Open pull request eligible for dispatch."""

    number: int
    title: str | None
    branch_ref: str  # head branch name
    author: str

    @property
    def label(self) -> str:
        """Menu label, e.g. '#10 - Fix bug'."""
        return f"#{self.number} - {self.title or ''}"


@dataclass(frozen=True)
class CommitRef:
    """A commit on a branch, identified by full and short sha."""

    full_sha: str
    short_sha: str

    @classmethod
    def from_sha(cls, full_sha: str) -> "CommitRef":
        return cls(full_sha=full_sha, short_sha=full_sha[:SHORT_SHA_LENGTH])


@dataclass(frozen=True)
class WorkflowDescriptor:
    """GitHub Actions workflow registered in a repository."""

    id: str
    name: str
    path: str  # e.g. ".github/workflows/deploy.yml"

    @property
    def label(self) -> str:
        return f"{self.name} ({self.path})"


@dataclass(frozen=True)
class DispatchRequest:
    """A workflow_dispatch call, built once and sent at most once."""

    repo_id: GitHubRepoId
    workflow_id: str
    git_ref: str  # branch the workflow runs on
    inputs: Mapping[str, str]

    def payload(self) -> dict[str, object]:
        """Request body for the workflow dispatch endpoint."""
        return {"ref": self.git_ref, "inputs": dict(self.inputs)}
