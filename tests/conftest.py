"""Shared fixtures."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from woopflow.clients.ragflow import RagflowClient
from woopflow.config import Settings

Handler = Callable[[httpx.Request], httpx.Response]


def make_settings(**overrides: Any) -> Settings:
    """Settings pointing at a fake RAGFlow host, independent of the environment."""

    values: dict[str, Any] = {
        "ragflow_base_url": "https://rag.example.com/api/",
        "ragflow_api_key": "secret-key",
        "ragflow_query_path": "v1/query",
        "ragflow_datasets_path": "v1/datasets",
        "ragflow_timeout": 30000,
        "cors_allowed_origins": "",
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_client(handler: Handler, **overrides: Any) -> RagflowClient:
    return RagflowClient(make_settings(**overrides), transport=httpx.MockTransport(handler))


class Recorder:
    """Captures requests reaching the fake RAGFlow host."""

    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.response = response or httpx.Response(200, json={"code": 0, "data": {"answer": "ok"}})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
