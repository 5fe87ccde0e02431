"""Tests for loading DispatchConfig from environment variables."""

import pytest

from prdispatch.core.config import DEFAULT_API_URL, load_config
from prdispatch.core.errors import ConfigurationMissing

REQUIRED = {"GITHUB_TOKEN": "ghp_test", "GITHUB_ORG": "acme", "GITHUB_REPO": "service"}


def test_load_config_reads_required_variables() -> None:
    config = load_config(REQUIRED)

    assert config.token == "ghp_test"
    assert config.repo_id.slug == "acme/service"
    assert config.workflow_id is None
    assert config.api_url == DEFAULT_API_URL


def test_load_config_reads_optional_variables() -> None:
    environ = {
        **REQUIRED,
        "DEPLOY_EXPERIMENTAL_WORKFLOW_ID": "12345",
        "GITHUB_API_URL": "https://ghe.example.com/api/v3",
    }

    config = load_config(environ)

    assert config.workflow_id == "12345"
    assert config.api_url == "https://ghe.example.com/api/v3"


def test_load_config_blank_workflow_id_means_interactive() -> None:
    config = load_config({**REQUIRED, "DEPLOY_EXPERIMENTAL_WORKFLOW_ID": "  "})

    assert config.workflow_id is None


def test_load_config_missing_token() -> None:
    environ = {k: v for k, v in REQUIRED.items() if k != "GITHUB_TOKEN"}

    with pytest.raises(ConfigurationMissing) as exc_info:
        load_config(environ)

    assert exc_info.value.missing == ["GITHUB_TOKEN"]
    assert "GITHUB_TOKEN not found in environment" in exc_info.value.message


def test_load_config_reports_every_missing_variable() -> None:
    with pytest.raises(ConfigurationMissing) as exc_info:
        load_config({"GITHUB_ORG": ""})

    assert exc_info.value.missing == ["GITHUB_TOKEN", "GITHUB_ORG", "GITHUB_REPO"]
