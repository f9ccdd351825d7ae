"""Tests for the RAGFlow HTTP client."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable

import httpx
import pytest

from conftest import Recorder, make_client, make_settings
from woopflow.clients.ragflow import RagflowClient, build_headers, build_url
from woopflow.errors import ConfigurationError, UnreachableError, UpstreamError


def _call(client: RagflowClient, op: Callable[[RagflowClient], Awaitable[Any]]) -> Any:
    async def _run() -> Any:
        try:
            return await op(client)
        finally:
            await client.aclose()

    return asyncio.run(_run())


def test_build_url_follows_relative_url_rules() -> None:
    assert build_url("https://rag.example.com/api/", "v1/query") == "https://rag.example.com/api/v1/query"
    assert build_url("https://rag.example.com/api/", "/v1/query") == "https://rag.example.com/v1/query"
    assert build_url("https://rag.example.com/api", "v1/query") == "https://rag.example.com/v1/query"


def test_build_headers_only_adds_bearer_when_configured() -> None:
    assert build_headers("") == {"Content-Type": "application/json"}
    assert build_headers("k") == {"Content-Type": "application/json", "Authorization": "Bearer k"}


def test_run_query_posts_payload(recorder: Recorder) -> None:
    """It should POST the payload as JSON with auth header and return the decoded body."""

    client = make_client(recorder)
    payload = {"question": "hi", "dataset_ids": ["d1"]}

    result = _call(client, lambda c: c.run_query(payload))

    assert result == {"code": 0, "data": {"answer": "ok"}}
    [request] = recorder.requests
    assert request.method == "POST"
    assert str(request.url) == "https://rag.example.com/api/v1/query"
    assert request.headers["authorization"] == "Bearer secret-key"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == payload


def test_run_query_without_api_key_sends_no_authorization(recorder: Recorder) -> None:
    client = make_client(recorder, ragflow_api_key="")

    _call(client, lambda c: c.run_query({}))

    assert "authorization" not in recorder.requests[0].headers


def test_timeout_is_taken_from_settings_in_milliseconds(recorder: Recorder) -> None:
    client = make_client(recorder, ragflow_timeout=1500)

    _call(client, lambda c: c.run_query({}))

    assert recorder.requests[0].extensions["timeout"]["read"] == 1.5


def test_list_datasets_gets_endpoint(recorder: Recorder) -> None:
    client = make_client(recorder)

    _call(client, lambda c: c.list_datasets())

    [request] = recorder.requests
    assert request.method == "GET"
    assert str(request.url) == "https://rag.example.com/api/v1/datasets"


@pytest.mark.parametrize(
    ("overrides", "op", "status", "message"),
    [
        ({"ragflow_base_url": ""}, "run_query", 500, "RAGFLOW_BASE_URL is not configured."),
        ({"ragflow_query_path": ""}, "run_query", 500, "RAGFLOW_QUERY_PATH is not configured."),
        ({"ragflow_base_url": ""}, "list_datasets", 500, "RAGFLOW_BASE_URL is not configured."),
        ({"ragflow_datasets_path": ""}, "list_datasets", 501, "RAGFLOW_DATASETS_PATH is not configured."),
    ],
)
def test_missing_configuration_fails_before_network(
    recorder: Recorder, overrides: dict[str, str], op: str, status: int, message: str
) -> None:
    client = make_client(recorder, **overrides)

    async def _op(c: RagflowClient) -> Any:
        if op == "run_query":
            return await c.run_query({})
        return await c.list_datasets()

    with pytest.raises(ConfigurationError) as excinfo:
        _call(client, _op)

    assert excinfo.value.status == status
    assert excinfo.value.message == message
    assert recorder.requests == []


def test_upstream_error_uses_body_message() -> None:
    client = make_client(Recorder(httpx.Response(403, json={"code": 109, "message": "Invalid API key"})))

    with pytest.raises(UpstreamError) as excinfo:
        _call(client, lambda c: c.run_query({}))

    assert excinfo.value.status == 403
    assert excinfo.value.message == "Invalid API key"
    assert excinfo.value.data == {"code": 109, "message": "Invalid API key"}


def test_upstream_error_falls_back_to_reason_phrase() -> None:
    client = make_client(Recorder(httpx.Response(502, text="<html>bad gateway</html>")))

    with pytest.raises(UpstreamError) as excinfo:
        _call(client, lambda c: c.list_datasets())

    assert excinfo.value.status == 502
    assert excinfo.value.message == "Bad Gateway"


@pytest.mark.parametrize("exc_type", [httpx.ReadTimeout, httpx.ConnectError])
def test_no_response_maps_to_unreachable(exc_type: type[httpx.RequestError]) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_type("no response", request=request)

    client = make_client(handler)

    with pytest.raises(UnreachableError) as excinfo:
        _call(client, lambda c: c.run_query({}))

    assert excinfo.value.status == 504
    assert excinfo.value.message == "No response received from RAGFlow service."


def test_deadline_covers_the_whole_request() -> None:
    """It should give up once the configured timeout elapses even if no httpx phase timed out."""

    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json={"code": 0})

    client = RagflowClient(make_settings(ragflow_timeout=50), transport=httpx.MockTransport(slow))

    with pytest.raises(UnreachableError) as excinfo:
        _call(client, lambda c: c.run_query({}))

    assert excinfo.value.status == 504
    assert excinfo.value.message == "No response received from RAGFlow service."


def test_non_json_body_is_returned_as_text() -> None:
    client = make_client(Recorder(httpx.Response(200, text="plain answer")))

    assert _call(client, lambda c: c.run_query({})) == "plain answer"
