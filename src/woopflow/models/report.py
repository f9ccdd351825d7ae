"""WOOP report request models.

Every field of the report request is free-form JSON. The models here only name the fields
and split the payload configuration into its control keys; content checks live in
:mod:`woopflow.woop.report` so that they surface as 400s instead of schema errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

StructuredValue = Union[
    str,
    int,
    float,
    bool,
    None,
    list["StructuredValue"],
    dict[str, "StructuredValue"],
]

Timeframe = Literal["24h", "4w", "3-12m", "none"]

PAYLOAD_CONTROL_KEYS = ("payload", "promptField", "appendAsMessage")


@dataclass(frozen=True)
class PayloadConfig:
    """Where a generated prompt goes inside the outgoing request body."""

    payload: dict[str, Any] | None = None
    prompt_field: str | None = None
    append_as_message: bool = False
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Any) -> PayloadConfig | None:
        """Parse the caller's ``payloadConfig`` value.

        Returns ``None`` when the value is not a JSON object.
        """

        if not isinstance(raw, Mapping):
            return None
        payload = raw.get("payload")
        prompt_field = raw.get("promptField")
        return cls(
            payload=dict(payload) if isinstance(payload, Mapping) else None,
            prompt_field=prompt_field if isinstance(prompt_field, str) else None,
            append_as_message=raw.get("appendAsMessage") is True,
            extras={k: v for k, v in raw.items() if k not in PAYLOAD_CONTROL_KEYS},
        )


class WoopReportRequest(BaseModel):
    """Body of ``POST /api/ragflow/woop``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    personal_info: Any = Field(default=None, alias="personalInfo")
    current_skill: Any = Field(default=None, alias="currentSkill")
    goals: Any = None
    timeframe: Any = None
    resources: Any = Field(default_factory=list)
    payload_config: Any = Field(default=None, alias="payloadConfig")

    @classmethod
    def from_body(cls, body: Any) -> WoopReportRequest:
        """Build a request from a decoded JSON body of any shape."""

        if not isinstance(body, Mapping):
            return cls()
        return cls.model_validate(dict(body))
