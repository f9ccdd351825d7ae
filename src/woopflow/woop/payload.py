"""Injection of a generated prompt into a caller-shaped request body.

Callers describe the backend payload they need through ``payloadConfig``. The prompt is
placed by the first matching strategy in :data:`PROMPT_STRATEGIES`, evaluated in order:

1. ``promptField`` (dotted path) is set
2. ``appendAsMessage`` is true, or the base already has a ``messages`` list
3. the base's ``query`` is an object
4. the base's ``prompt`` is a string or absent
5. fallback: ``query``

Without a usable config the body is simply ``{"query": prompt}``.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable

from woopflow.models.report import PayloadConfig


def _path_segments(path: str | None) -> list[str]:
    if not path:
        return []
    return [segment.strip() for segment in path.split(".") if segment.strip()]


def set_by_path(target: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """Set ``value`` at a dotted ``path``, creating intermediate objects.

    Intermediate keys that are missing or hold a non-object value are replaced by an
    empty dict, so ``{"a": 1}`` with path ``"a.b"`` loses the original ``1``. A path
    without segments leaves ``target`` unchanged.
    """

    segments = _path_segments(path)
    if not segments:
        return target
    node = target
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[segments[-1]] = value
    return target


@dataclass(frozen=True)
class PromptStrategy:
    """A named (predicate, transform) pair."""

    name: str
    applies: Callable[[dict[str, Any], PayloadConfig], bool]
    apply: Callable[[dict[str, Any], PayloadConfig, str], dict[str, Any]]


def _set_prompt_field(base: dict[str, Any], config: PayloadConfig, prompt: str) -> dict[str, Any]:
    return set_by_path(base, config.prompt_field or "", prompt)


def _append_message(base: dict[str, Any], _config: PayloadConfig, prompt: str) -> dict[str, Any]:
    existing = base.get("messages")
    messages = list(existing) if isinstance(existing, list) else []
    messages.append({"role": "user", "content": prompt})
    base["messages"] = messages
    return base


def _set_query_prompt(base: dict[str, Any], _config: PayloadConfig, prompt: str) -> dict[str, Any]:
    base["query"]["prompt"] = prompt
    return base


def _set_key(key: str) -> Callable[[dict[str, Any], PayloadConfig, str], dict[str, Any]]:
    def _apply(base: dict[str, Any], _config: PayloadConfig, prompt: str) -> dict[str, Any]:
        base[key] = prompt
        return base

    return _apply


PROMPT_STRATEGIES: tuple[PromptStrategy, ...] = (
    PromptStrategy(
        name="prompt_field",
        applies=lambda base, config: bool(_path_segments(config.prompt_field)),
        apply=_set_prompt_field,
    ),
    PromptStrategy(
        name="messages",
        applies=lambda base, config: config.append_as_message or isinstance(base.get("messages"), list),
        apply=_append_message,
    ),
    PromptStrategy(
        name="query_object",
        applies=lambda base, config: isinstance(base.get("query"), dict),
        apply=_set_query_prompt,
    ),
    PromptStrategy(
        name="prompt",
        applies=lambda base, config: "prompt" not in base or isinstance(base["prompt"], str),
        apply=_set_key("prompt"),
    ),
    PromptStrategy(
        name="query",
        applies=lambda base, config: True,
        apply=_set_key("query"),
    ),
)


def base_payload(config: PayloadConfig) -> dict[str, Any]:
    """Deep copy of the explicit payload, or of the non-control config keys."""

    if config.payload is not None:
        return copy.deepcopy(config.payload)
    return copy.deepcopy(config.extras)


def select_strategy(base: dict[str, Any], config: PayloadConfig) -> PromptStrategy:
    """First strategy whose predicate matches; the last one always does."""

    return next(strategy for strategy in PROMPT_STRATEGIES if strategy.applies(base, config))


def assemble_payload(raw_config: Any, prompt: str) -> dict[str, Any]:
    """Build the backend request body for ``prompt``.

    Args:
        raw_config: The caller's ``payloadConfig`` (any JSON value) or a parsed
            :class:`PayloadConfig`.
        prompt: Generated prompt text.

    Returns:
        A new dict; the config and anything it references are never mutated.
    """

    config = raw_config if isinstance(raw_config, PayloadConfig) else PayloadConfig.from_raw(raw_config)
    if config is None:
        return {"query": prompt}

    base = base_payload(config)
    return select_strategy(base, config).apply(base, config, prompt)
