"""Rendering of free-form coaching input into prompt text.

All functions here are pure: the same structure always renders to the same text. Empty
values (blank strings, ``None``, containers without content) are dropped at every level,
so a rendered entry never ends in an empty value.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from woopflow.models.report import StructuredValue

NOT_PROVIDED = "Not provided."
NO_RESOURCES = "No personalized learning resources were returned."

RESOURCE_TITLE_KEYS = ("title", "name")
RESOURCE_LINK_KEYS = ("url", "link")
RESOURCE_SUMMARY_KEYS = ("summary", "description", "notes")
RESOURCE_EXTRA_KEYS = ("skills", "topics", "level", "format", "duration")

_SEPARATOR_RE = re.compile(r"[_-]+")
_CAMEL_RE = re.compile(r"([a-z0-9])([A-Z])")
_WHITESPACE_RE = re.compile(r"\s+")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def humanize_key(key: str) -> str:
    """Turn a field name into a label.

    ``"current_skill_level"`` -> ``"Current skill level"``,
    ``"yearsOfExperience"`` -> ``"Years Of Experience"``.
    """

    text = _SEPARATOR_RE.sub(" ", key)
    text = _CAMEL_RE.sub(r"\1 \2", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    return text[:1].upper() + text[1:]


def has_content(value: StructuredValue) -> bool:
    """Whether a value carries anything worth rendering.

    Strings count when non-blank, containers when at least one element counts, ``None``
    never counts and any other scalar always does.
    """

    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if _is_sequence(value):
        return any(has_content(item) for item in value)
    if isinstance(value, Mapping):
        return any(has_content(item) for item in value.values())
    return True


def _labelled_entries(value: Mapping[Any, Any]) -> list[str]:
    entries: list[str] = []
    for key, item in value.items():
        text = format_value(item)
        if text:
            entries.append(f"{humanize_key(str(key))}: {text}")
    return entries


def format_value(value: StructuredValue) -> str:
    """Render any structured value on a single line.

    Lists join with ``", "``, mappings render ``"Key: value"`` pairs joined with ``"; "``.
    """

    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if _is_sequence(value):
        parts = (format_value(item) for item in value)
        return ", ".join(part for part in parts if part)
    if isinstance(value, Mapping):
        return "; ".join(_labelled_entries(value))
    return str(value)


def format_personal_info(value: StructuredValue) -> str:
    """Render personal information as text or a bullet list."""

    if isinstance(value, str):
        return value.strip()
    if _is_sequence(value):
        lines = (format_value(item) for item in value)
        return "\n".join(f"- {line}" for line in lines if line)
    if isinstance(value, Mapping):
        return "\n".join(f"- {entry}" for entry in _labelled_entries(value))
    return format_value(value)


def format_goals(value: StructuredValue) -> str:
    """Render goals as a numbered list.

    Numbering only counts goals that render to something.
    """

    if not _is_sequence(value):
        return format_value(value)
    lines = [line for line in (format_value(item) for item in value) if line]
    return "\n".join(f"{n}. {line}" for n, line in enumerate(lines, start=1))


def _first_text(resource: Mapping[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        text = format_value(resource.get(key))
        if text:
            return text
    return ""


def _format_resource_mapping(resource: Mapping[str, Any], index: int) -> str:
    title = _first_text(resource, RESOURCE_TITLE_KEYS) or f"Resource {index}"
    link = _first_text(resource, RESOURCE_LINK_KEYS)
    summary = _first_text(resource, RESOURCE_SUMMARY_KEYS)

    extras: list[str] = []
    for key in RESOURCE_EXTRA_KEYS:
        text = format_value(resource.get(key))
        if text:
            extras.append(f"{humanize_key(key)}: {text}")

    details = " | ".join(part for part in (summary, " | ".join(extras)) if part)

    line = f"{index}. {title}"
    if link:
        line += f" ({link})"
    if details:
        line += f" - {details}"
    return line


def _format_resource(resource: StructuredValue, index: int) -> str:
    if resource is None:
        return ""
    if isinstance(resource, Mapping):
        return _format_resource_mapping(resource, index)
    if isinstance(resource, str):
        text = resource.strip()
    elif _is_sequence(resource):
        text = format_value(resource)
    else:
        text = str(resource).strip()
    return f"{index}. {text}" if text else ""


def format_resources(value: StructuredValue) -> str:
    """Render matched learning resources as a numbered list.

    Each item keeps its original 1-based position, so dropped items leave gaps in the
    numbering. Empty or non-list input renders :data:`NO_RESOURCES`.
    """

    if not _is_sequence(value) or not value:
        return NO_RESOURCES
    lines = [_format_resource(resource, index) for index, resource in enumerate(value, start=1)]
    lines = [line for line in lines if line]
    if not lines:
        return NO_RESOURCES
    return "\n".join(lines)
