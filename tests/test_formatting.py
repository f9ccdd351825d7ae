"""Tests for value and section formatting."""

from __future__ import annotations

import copy

import pytest

from woopflow.woop.formatting import (
    NO_RESOURCES,
    format_goals,
    format_personal_info,
    format_resources,
    format_value,
    has_content,
    humanize_key,
)


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("current_skill", "Current skill"),
        ("yearsOfExperience", "Years Of Experience"),
        ("  learning--style__pref ", "Learning style pref"),
        ("level2Goal", "Level2 Goal"),
        ("name", "Name"),
    ],
)
def test_humanize_key(key: str, expected: str) -> None:
    """It should split separators and camel case, then capitalize the first letter."""

    assert humanize_key(key) == expected


def test_format_value_scalars() -> None:
    assert format_value(None) == ""
    assert format_value("  hello ") == "hello"
    assert format_value(28) == "28"
    assert format_value(True) == "True"


def test_formatters_accept_every_structured_value_shape() -> None:
    """It should render strings, numbers, booleans, None, lists and mappings nested in each other."""

    value = {"name": "Jane", "age": 28, "gpa": 3.5, "remote": False, "mentor": None, "langs": ["go", {"level": 2}]}

    expected = "Name: Jane; Age: 28; Gpa: 3.5; Remote: False; Langs: go, Level: 2"
    assert format_value(value) == expected
    assert has_content(value)
    assert format_personal_info(value).splitlines()[-1] == "- Langs: go, Level: 2"
    assert format_goals([value, None]) == f"1. {expected}"


def test_format_value_drops_empty_entries() -> None:
    """It should drop blank list items and keys whose value renders empty."""

    assert format_value(["a", "", None, " b ", []]) == "a, b"
    assert format_value({"first_name": "Jane", "empty": "  ", "tags": [], "extra": {"x": None}}) == (
        "First name: Jane"
    )


def test_format_value_nested_mapping() -> None:
    value = {"profile": {"age": 28, "city": " "}, "languages": ["en", "fr"]}

    assert format_value(value) == "Profile: Age: 28; Languages: en, fr"


def test_format_value_is_deterministic() -> None:
    """It should render equal structures to identical text."""

    value = {"goals": ["ship", {"when": "Q3", "why": ""}], "note": "  x "}

    assert format_value(value) == format_value(copy.deepcopy(value))
    assert format_value(value) == format_value(value)


def test_format_value_never_renders_empty_values() -> None:
    value = {"a": "", "b": {"c": None, "d": [" ", {}]}, "e": "kept", "f": [None, "z"]}

    text = format_value(value)

    assert text == "E: kept; F: z"
    assert not text.endswith(": ")
    assert ": ;" not in text


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        ("", False),
        ("   ", False),
        ("x", True),
        ([], False),
        ([None, " "], False),
        ([None, "x"], True),
        ({}, False),
        ({"a": {"b": ""}}, False),
        ({"a": {"b": 0}}, True),
        (0, True),
        (False, True),
    ],
)
def test_has_content(value: object, expected: bool) -> None:
    assert has_content(value) is expected


def test_format_personal_info_variants() -> None:
    assert format_personal_info("  Jane, 28 ") == "Jane, 28"
    assert format_personal_info(["Jane", "", {"age": 28}]) == "- Jane\n- Age: 28"
    assert format_personal_info({"name": "Jane", "city": "", "jobTitle": "Analyst"}) == (
        "- Name: Jane\n- Job Title: Analyst"
    )
    assert format_personal_info([]) == ""
    assert format_personal_info({}) == ""


def test_format_goals_numbers_only_surviving_items() -> None:
    """It should number goals consecutively, skipping empty ones."""

    assert format_goals(["", "Learn Go", None, {"goal": "Ship a CLI"}]) == "1. Learn Go\n2. Goal: Ship a CLI"


def test_format_goals_falls_back_to_value_formatter() -> None:
    assert format_goals("  Run a 10k ") == "Run a 10k"
    assert format_goals({"main": "Learn Go"}) == "Main: Learn Go"
    assert format_goals([]) == ""


@pytest.mark.parametrize("value", [[], None, "not a list", {"title": "x"}, [None, "  "]])
def test_format_resources_fallback(value: object) -> None:
    """It should return the fixed fallback when nothing renders."""

    assert format_resources(value) == NO_RESOURCES


def test_format_resources_full_mapping() -> None:
    resources = [
        {
            "title": "Tour of Go",
            "url": "https://go.dev/tour",
            "summary": "Interactive intro",
            "level": "beginner",
            "format": "online",
        }
    ]

    assert format_resources(resources) == (
        "1. Tour of Go (https://go.dev/tour) - Interactive intro | Level: beginner | Format: online"
    )


def test_format_resources_mapping_fallbacks() -> None:
    """It should fall back to a positional title and render extras as details."""

    resources = [
        "Go by Example",
        {"link": "https://example.com/testing", "skills": ["go", "testing"], "duration": "2h"},
    ]

    assert format_resources(resources) == (
        "1. Go by Example\n"
        "2. Resource 2 (https://example.com/testing) - Skills: go, testing | Duration: 2h"
    )


def test_format_resources_summary_precedence_and_unknown_fields() -> None:
    resources = [
        {"name": "Effective Go", "description": "", "notes": "Read chapter 3", "author": "The Go team"},
        {"title": "", "name": "Book"},
    ]

    assert format_resources(resources) == "1. Effective Go - Read chapter 3\n2. Book"


def test_format_resources_keeps_positions_of_dropped_items() -> None:
    """It should number by original position, leaving gaps for dropped items."""

    assert format_resources(["  Go by Example ", None, "  ", 42]) == "1. Go by Example\n4. 42"
