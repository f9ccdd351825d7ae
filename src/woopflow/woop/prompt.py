"""WOOP prompt construction."""

from __future__ import annotations

from woopflow.models.report import Timeframe
from woopflow.prompts.woop import WOOP_PROMPT_TEMPLATE
from woopflow.woop.formatting import NO_RESOURCES, NOT_PROVIDED
from woopflow.woop.timeframe import TIMEFRAME_DESCRIPTIONS


def build_woop_prompt(
    *,
    timeframe: Timeframe,
    personal_info: str,
    current_skill: str,
    goals: str,
    resources: str,
) -> str:
    """Fill the WOOP template with already-formatted sections.

    Blank sections are replaced by ``"Not provided."`` (resources by their own
    fallback), so the template never contains an empty block.
    """

    return WOOP_PROMPT_TEMPLATE.format(
        personal_info=personal_info or NOT_PROVIDED,
        current_skill=current_skill or NOT_PROVIDED,
        goals=goals or NOT_PROVIDED,
        resources=resources or NO_RESOURCES,
        timeframe=timeframe,
        timeframe_description=TIMEFRAME_DESCRIPTIONS[timeframe],
    )
