"""WOOP report generation.

Validation -> timeframe normalization -> section formatting -> prompt -> payload ->
backend dispatch. Everything before the dispatch is pure; invalid input fails before any
network call is made.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from woopflow.errors import ValidationError
from woopflow.logging import get_logger
from woopflow.models.report import WoopReportRequest
from woopflow.woop.formatting import (
    format_goals,
    format_personal_info,
    format_resources,
    format_value,
    has_content,
)
from woopflow.woop.payload import assemble_payload
from woopflow.woop.prompt import build_woop_prompt
from woopflow.woop.timeframe import normalize_timeframe

logger = get_logger(__name__)

# (body field, model attribute), checked in this order
REQUIRED_FIELDS = (
    ("personalInfo", "personal_info"),
    ("currentSkill", "current_skill"),
    ("goals", "goals"),
)


class QueryBackend(Protocol):
    """Anything that can forward a query payload to the backend."""

    async def run_query(self, payload: Any) -> Any:
        """Send ``payload`` and return the raw response."""


@dataclass(frozen=True)
class PreparedReport:
    """Prompt and request body generated for one report."""

    prompt: str
    payload: dict[str, Any]


def validate_report_request(request: WoopReportRequest) -> None:
    """Raise :class:`ValidationError` for the first required field without content."""

    for field_name, attr in REQUIRED_FIELDS:
        if not has_content(getattr(request, attr)):
            raise ValidationError(f"{field_name} is required.", field=field_name)


def prepare_report(request: WoopReportRequest) -> PreparedReport:
    """Validate the request and build its prompt and backend payload.

    Raises:
        ValidationError: A required field is empty or the timeframe is unknown.
    """

    validate_report_request(request)
    timeframe = normalize_timeframe(request.timeframe)

    prompt = build_woop_prompt(
        timeframe=timeframe,
        personal_info=format_personal_info(request.personal_info),
        current_skill=format_value(request.current_skill),
        goals=format_goals(request.goals),
        resources=format_resources(request.resources),
    )
    payload = assemble_payload(request.payload_config, prompt)

    logger.info(
        "WOOP prompt prepared",
        extra={"timeframe": timeframe, "prompt_len": len(prompt), "payload_keys": sorted(payload)},
    )
    return PreparedReport(prompt=prompt, payload=payload)


class WoopReportService:
    """Generates WOOP reports through the backend query endpoint."""

    def __init__(self, backend: QueryBackend) -> None:
        self._backend = backend

    async def generate_report(self, body: Any) -> Any:
        """Generate a report for a raw request body.

        Args:
            body: Decoded JSON body of the report request.

        Returns:
            The backend's response, unchanged.
        """

        request = body if isinstance(body, WoopReportRequest) else WoopReportRequest.from_body(body)
        prepared = prepare_report(request)
        return await self._backend.run_query(prepared.payload)
