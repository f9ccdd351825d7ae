"""Models used across the project."""

from __future__ import annotations

from woopflow.models.report import (
    PAYLOAD_CONTROL_KEYS,
    PayloadConfig,
    StructuredValue,
    Timeframe,
    WoopReportRequest,
)

__all__ = [
    "PAYLOAD_CONTROL_KEYS",
    "PayloadConfig",
    "StructuredValue",
    "Timeframe",
    "WoopReportRequest",
]
