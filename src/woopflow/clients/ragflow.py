"""RAGFlow HTTP client.

Thin async wrapper over ``httpx`` that resolves endpoint paths against the configured base
URL, attaches the bearer credential, and translates transport and status failures into
the service's error taxonomy. Responses are returned as decoded JSON without any
interpretation.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any
from urllib.parse import urljoin

import httpx

from woopflow.config import Settings
from woopflow.errors import ConfigurationError, UnreachableError, UpstreamError
from woopflow.logging import get_logger

logger = get_logger(__name__)

UNREACHABLE_MESSAGE = "No response received from RAGFlow service."
DEFAULT_UPSTREAM_MESSAGE = "RAGFlow request failed"


def build_url(base_url: str, path: str) -> str:
    """Resolve ``path`` against ``base_url`` with standard relative-URL rules."""

    return urljoin(base_url, path)


def build_headers(api_key: str | None) -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def _decode_body(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def _upstream_error(resp: httpx.Response) -> UpstreamError:
    data = _decode_body(resp)
    message = None
    if isinstance(data, dict) and data.get("message"):
        message = str(data["message"])
    return UpstreamError(
        message or resp.reason_phrase or DEFAULT_UPSTREAM_MESSAGE,
        status=resp.status_code,
        data=data,
    )


class RagflowClient:
    """Client for the RAGFlow query and dataset endpoints."""

    def __init__(self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._settings.ragflow_timeout_s),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying connection pool."""

        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _resolve(self, path: str, *, path_env: str, missing_status: int = 500) -> str:
        if not self._settings.ragflow_base_url:
            raise ConfigurationError("RAGFLOW_BASE_URL is not configured.")
        if not path:
            raise ConfigurationError(f"{path_env} is not configured.", status=missing_status)
        return build_url(self._settings.ragflow_base_url, path)

    async def _request(self, method: str, url: str, *, json: Any = None) -> Any:
        started = time.monotonic()
        kwargs: dict[str, Any] = {"headers": build_headers(self._settings.ragflow_api_key)}
        if method == "POST":
            kwargs["json"] = json
        try:
            # httpx timeouts are per phase; the deadline covers the whole exchange.
            resp = await asyncio.wait_for(
                self._http().request(method, url, **kwargs),
                timeout=self._settings.ragflow_timeout_s,
            )
        except (httpx.RequestError, asyncio.TimeoutError) as e:
            logger.warning(
                "RAGFlow request failed without response",
                extra={
                    "method": method,
                    "url": url,
                    "error_type": type(e).__name__,
                    "elapsed_ms": int((time.monotonic() - started) * 1000),
                },
            )
            raise UnreachableError(UNREACHABLE_MESSAGE) from e

        latency_ms = int((time.monotonic() - started) * 1000)
        if resp.is_error:
            logger.warning(
                "RAGFlow request rejected",
                extra={"method": method, "url": url, "status_code": resp.status_code, "latency_ms": latency_ms},
            )
            raise _upstream_error(resp)

        logger.info(
            "RAGFlow request ok",
            extra={"method": method, "url": url, "status_code": resp.status_code, "latency_ms": latency_ms},
        )
        return _decode_body(resp)

    async def run_query(self, payload: Any) -> Any:
        """POST ``payload`` to the query endpoint and return the decoded response."""

        url = self._resolve(self._settings.ragflow_query_path, path_env="RAGFLOW_QUERY_PATH")
        return await self._request("POST", url, json=payload)

    async def list_datasets(self) -> Any:
        """GET the datasets endpoint.

        Raises:
            ConfigurationError: With status 501 when no datasets path is configured.
        """

        url = self._resolve(
            self._settings.ragflow_datasets_path,
            path_env="RAGFLOW_DATASETS_PATH",
            missing_status=501,
        )
        return await self._request("GET", url)
