"""Tests for the prdispatch command."""

import httpx
import pytest
from click.testing import CliRunner

from prdispatch.cli.cli import cli
from prdispatch.gateway.github.auth.fake import FakeGitHubAuthGateway
from prdispatch.gateway.github.pr.fake import FakeGitHubPrGateway
from prdispatch.gateway.github.repo.fake import FakeGitHubRepoGateway
from prdispatch.gateway.github.workflow.dry_run import DryRunGitHubWorkflowGateway
from prdispatch.gateway.github.workflow.fake import FakeGitHubWorkflowGateway
from prdispatch.gateway.http.real import RealHttpClient
from prdispatch.gateway.prompt.fake import FakePrompter
from tests.test_utils.context_builders import (
    ADD_FEAT_SHA,
    build_dispatch_context,
    build_github,
)


def test_dispatch_selected_pull_request() -> None:
    workflow = FakeGitHubWorkflowGateway()
    ctx = build_dispatch_context(
        github=build_github(workflow=workflow),
        prompter=FakePrompter(selections=[2, 1]),
    )

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Authenticated as: octocat" in result.output
    assert "Successfully triggered GitHub Action:" in result.output
    assert "Branch: add-feat" in result.output
    assert f"Commit: {ADD_FEAT_SHA[:7]}" in result.output
    assert "Environment: experimental3" in result.output
    assert len(workflow.dispatched) == 1


def test_environment_argument_inside_range_proceeds() -> None:
    workflow = FakeGitHubWorkflowGateway()
    ctx = build_dispatch_context(github=build_github(workflow=workflow))

    result = CliRunner().invoke(cli, ["6"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Environment: experimental6" in result.output
    assert workflow.dispatched[0].inputs["target"] == "experimental6"


@pytest.mark.parametrize("argument", ["0", "7", "abc", "1.5"])
def test_invalid_environment_rejected_before_network(argument: str) -> None:
    auth = FakeGitHubAuthGateway()
    ctx = build_dispatch_context(github=build_github(auth=auth))

    result = CliRunner().invoke(cli, [argument], obj=ctx)

    assert result.exit_code == 2
    assert "ENVIRONMENT" in result.output
    assert auth.get_current_user_calls == []


def test_missing_token_fails_before_network() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(
            cli,
            ["1"],
            env={"GITHUB_TOKEN": None, "GITHUB_ORG": "acme", "GITHUB_REPO": "service"},
        )

    assert result.exit_code == 1
    assert "Error: GITHUB_TOKEN not found in environment" in result.output


def test_no_open_pull_requests_is_success() -> None:
    prompter = FakePrompter()
    ctx = build_dispatch_context(
        github=build_github(pr=FakeGitHubPrGateway(pull_requests=[])),
        prompter=prompter,
    )

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "No open pull requests found for your user" in result.output
    assert [p.prompt for p in prompter.prompts] == ["Select environment"]


def test_authentication_failure_shows_hint() -> None:
    ctx = build_dispatch_context(
        github=build_github(auth=FakeGitHubAuthGateway(authenticated=False)),
    )

    result = CliRunner().invoke(cli, ["1"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: Failed to fetch current user" in result.output
    assert "Please check your GitHub token has correct permissions" in result.output


def test_dispatch_failure_shows_input_hint() -> None:
    workflow = FakeGitHubWorkflowGateway(dispatch_error="Unexpected inputs provided")
    ctx = build_dispatch_context(github=build_github(workflow=workflow))

    result = CliRunner().invoke(cli, ["1"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to trigger workflow" in result.output
    assert "Please check workflow inputs match your workflow file." in result.output


def test_cancelled_prompt_exits_non_zero() -> None:
    ctx = build_dispatch_context(prompter=FakePrompter(cancel=True))

    result = CliRunner().invoke(cli, [], obj=ctx)

    assert result.exit_code == 1
    assert "Cancelled." in result.output


def test_dry_run_prints_payload_without_dispatching() -> None:
    wrapped = FakeGitHubWorkflowGateway()
    ctx = build_dispatch_context(
        github=build_github(workflow=DryRunGitHubWorkflowGateway(wrapped)),
        dry_run=True,
    )

    result = CliRunner().invoke(cli, ["2"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would dispatch workflow 4242 on acme/service" in result.output
    assert '"target": "experimental2"' in result.output
    assert "No workflow was triggered" in result.output
    assert wrapped.dispatched == []


def test_commit_without_sha_reports_error() -> None:
    workflow = FakeGitHubWorkflowGateway()
    ctx = build_dispatch_context(
        github=build_github(
            repo=FakeGitHubRepoGateway(branch_commits={"fix-bug": [""]}),
            workflow=workflow,
        )
    )

    result = CliRunner().invoke(cli, ["1"], obj=ctx)

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error: Latest commit on branch 'fix-bug' has no sha" in result.output
    assert "Commit: " not in result.output
    assert workflow.dispatched == []


class _TrackingHttpClient(RealHttpClient):
    """RealHttpClient whose every request is rejected, recording close()."""

    instances: list["_TrackingHttpClient"] = []

    def __init__(self, *, token: str, base_url: str) -> None:
        super().__init__(
            token=token,
            base_url=base_url,
            transport=httpx.MockTransport(
                lambda request: httpx.Response(401, json={"message": "Bad credentials"})
            ),
        )
        self.closed = False
        _TrackingHttpClient.instances.append(self)

    def close(self) -> None:
        self.closed = True
        super().close()


def test_http_client_is_closed_when_command_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    _TrackingHttpClient.instances.clear()
    monkeypatch.setattr("prdispatch.cli.cli.RealHttpClient", _TrackingHttpClient)
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(
            cli,
            ["1"],
            env={"GITHUB_TOKEN": "ghp_test", "GITHUB_ORG": "acme", "GITHUB_REPO": "service"},
        )

    assert result.exit_code == 1
    assert "Bad credentials" in result.output
    assert len(_TrackingHttpClient.instances) == 1
    assert _TrackingHttpClient.instances[0].closed is True
