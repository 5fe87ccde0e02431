"""Tests for RealHttpClient using httpx.MockTransport."""

import json

import httpx
import pytest

from prdispatch.gateway.http.abc import GitHubApiError
from prdispatch.gateway.http.real import RealHttpClient


def _client(handler) -> RealHttpClient:
    return RealHttpClient(
        token="ghp_test",
        base_url="https://api.github.com",
        transport=httpx.MockTransport(handler),
    )


def test_get_sends_auth_headers_and_decodes_json() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"login": "octocat"})

    assert _client(handler).get("user") == {"login": "octocat"}

    request = seen[0]
    assert str(request.url) == "https://api.github.com/user"
    assert request.headers["Authorization"] == "Bearer ghp_test"
    assert request.headers["Accept"] == "application/vnd.github+json"
    assert request.headers["X-GitHub-Api-Version"] == "2022-11-28"


def test_get_passes_query_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    _client(handler).get("repos/acme/service/commits", params={"sha": "fix-bug"})

    assert seen[0].url.path == "/repos/acme/service/commits"
    assert seen[0].url.params["sha"] == "fix-bug"


def test_post_with_no_content_returns_none() -> None:
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(204)

    result = _client(handler).post(
        "repos/acme/service/actions/workflows/1/dispatches", data={"ref": "main"}
    )

    assert result is None
    assert bodies == [{"ref": "main"}]


def test_error_status_raises_with_api_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "Unexpected inputs provided: [\"target\"]"})

    with pytest.raises(GitHubApiError) as exc_info:
        _client(handler).post("repos/acme/service/actions/workflows/1/dispatches", data={})

    assert exc_info.value.status_code == 422
    assert "Unexpected inputs provided" in exc_info.value.detail
    assert "HTTP 422" in str(exc_info.value)


def test_transport_error_raises_without_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GitHubApiError) as exc_info:
        _client(handler).get("user")

    assert exc_info.value.status_code is None
    assert "connection refused" in exc_info.value.detail
