"""FastAPI app exposing the RAGFlow facade and WOOP report generation."""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from woopflow.api.routes import router as ragflow_router
from woopflow.clients.ragflow import RagflowClient
from woopflow.config import Settings, load_settings
from woopflow.errors import WoopflowError
from woopflow.logging import configure_logging, get_logger, log_exception, request_context
from woopflow.woop.report import WoopReportService

NOT_FOUND_MESSAGE = "Resource not found"
UNEXPECTED_MESSAGE = "Unexpected server error"
INVALID_BODY_MESSAGE = "Request body must be valid JSON."


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"message": message})


def create_app(settings: Settings | None = None, *, ragflow_client: RagflowClient | None = None) -> FastAPI:
    """Create FastAPI app.

    Args:
        settings: Settings to use; loaded from the environment when omitted.
        ragflow_client: Backend client to use; built from ``settings`` when omitted.
    """

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)
    client = ragflow_client or RagflowClient(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info("woopflow ready", extra={"port": settings.port})
        yield
        await client.aclose()

    app = FastAPI(title="woopflow", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.ragflow = client
    app.state.woop = WoopReportService(client)

    origins = settings.allowed_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # No configured origins: reflect whichever origin is calling.
        allow_origin_regex=None if origins else ".*",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_id(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        with request_context(request_id=request_id):
            try:
                response = await call_next(request)
            except Exception as exc:
                log_exception(logger, "Unhandled error", exc, path=request.url.path)
                response = _error(500, UNEXPECTED_MESSAGE)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(WoopflowError)
    async def handle_woopflow_error(request: Request, exc: WoopflowError) -> JSONResponse:
        if exc.status >= 500:
            log_exception(logger, "Request failed", exc, path=request.url.path, status=exc.status)
        return _error(exc.status, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_body(_request: Request, _exc: RequestValidationError) -> JSONResponse:
        return _error(400, INVALID_BODY_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Wrong method on a known path counts as an unmatched route.
        if exc.status_code in (404, 405):
            return _error(404, NOT_FOUND_MESSAGE)
        return _error(exc.status_code, str(exc.detail))

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(ragflow_router)

    return app
