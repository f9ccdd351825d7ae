"""WOOP prompt construction and report generation."""

from __future__ import annotations

from woopflow.woop.formatting import (
    NO_RESOURCES,
    NOT_PROVIDED,
    format_goals,
    format_personal_info,
    format_resources,
    format_value,
    has_content,
    humanize_key,
)
from woopflow.woop.payload import assemble_payload, set_by_path
from woopflow.woop.prompt import build_woop_prompt
from woopflow.woop.report import PreparedReport, WoopReportService, prepare_report
from woopflow.woop.timeframe import TIMEFRAMES, normalize_timeframe

__all__ = [
    "NO_RESOURCES",
    "NOT_PROVIDED",
    "TIMEFRAMES",
    "PreparedReport",
    "WoopReportService",
    "assemble_payload",
    "build_woop_prompt",
    "format_goals",
    "format_personal_info",
    "format_resources",
    "format_value",
    "has_content",
    "humanize_key",
    "normalize_timeframe",
    "prepare_report",
    "set_by_path",
]
