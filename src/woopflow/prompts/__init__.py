from __future__ import annotations

from woopflow.prompts.woop import WOOP_OUTPUT_KEYS, WOOP_PROMPT_TEMPLATE

__all__ = [
    "WOOP_OUTPUT_KEYS",
    "WOOP_PROMPT_TEMPLATE",
]
