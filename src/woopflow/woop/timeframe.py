"""Timeframe normalization."""

from __future__ import annotations

from typing import Any, cast

from woopflow.errors import InvalidTimeframe
from woopflow.models.report import Timeframe

TIMEFRAMES: tuple[Timeframe, ...] = ("24h", "4w", "3-12m", "none")
DEFAULT_TIMEFRAME: Timeframe = "none"

TIMEFRAME_DESCRIPTIONS: dict[Timeframe, str] = {
    "24h": "the next 24 hours",
    "4w": "the next 4 weeks",
    "3-12m": "the next 3 to 12 months",
    "none": "no fixed deadline",
}

# en dash, em dash, figure dash, minus sign, non-breaking hyphen
_DASH_TABLE = str.maketrans({"\u2013": "-", "\u2014": "-", "\u2012": "-", "\u2212": "-", "\u2011": "-"})


def normalize_timeframe(value: Any) -> Timeframe:
    """Canonicalize a free-form timeframe.

    Matching is case-insensitive and ignores surrounding whitespace; typographic dashes
    count as ``-``. Missing or blank input means ``"none"``.

    Raises:
        InvalidTimeframe: The value is not one of :data:`TIMEFRAMES`.
    """

    if value is None:
        return DEFAULT_TIMEFRAME
    text = str(value).strip().lower().translate(_DASH_TABLE)
    if not text:
        return DEFAULT_TIMEFRAME
    if text not in TIMEFRAMES:
        raise InvalidTimeframe(
            f"timeframe must be one of: {', '.join(TIMEFRAMES)}.",
            field="timeframe",
        )
    return cast(Timeframe, text)
