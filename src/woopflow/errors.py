"""Error taxonomy.

Every error raised on purpose by the service carries the HTTP status it maps to. The API
layer renders them as ``{"message": ...}``; anything not derived from
:class:`WoopflowError` is treated as an unexpected server error.
"""

from __future__ import annotations

from typing import Any


class WoopflowError(RuntimeError):
    """Base class for errors that map to an HTTP status."""

    status: int = 500

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class ValidationError(WoopflowError):
    """Client supplied a missing, empty or invalid field."""

    status = 400

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidTimeframe(ValidationError):
    pass


class ConfigurationError(WoopflowError):
    """Required backend configuration is absent.

    Use ``status=501`` for an optional capability that is simply not configured.
    """

    status = 500


class UpstreamError(WoopflowError):
    """Backend responded with a non-success status."""

    def __init__(self, message: str, *, status: int, data: Any = None) -> None:
        super().__init__(message, status=status)
        self.data = data


class UnreachableError(WoopflowError):
    """No response was received from the backend."""

    status = 504
