"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


_request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("woopflow_request_id", default="-")


class _ContextFilter(logging.Filter):
    """Inject request context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = _request_id_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def request_context(*, request_id: str) -> Any:
    """Temporarily bind request context for structured logging.

    Args:
        request_id: Request identifier.
    """

    token = _request_id_var.set(request_id)
    try:
        yield
    finally:
        _request_id_var.reset(token)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s req=%(request_id)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level.upper())
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger, msg: str, exc: BaseException | None = None, **context: Any
) -> None:
    """Log an exception with optional structured context.

    Pass ``exc`` when logging outside the ``except`` block that caught it.
    """

    exc_info: Any = exc if exc is not None else True
    if context:
        logger.error("%s | context=%s", msg, context, exc_info=exc_info)
    else:
        logger.error("%s", msg, exc_info=exc_info)
