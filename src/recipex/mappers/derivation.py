"""Derived recipe fields computed identically for every provider."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from recipex.schemas.enums import Difficulty


EASY_MAX_MINUTES = 25
INTERMEDIATE_MAX_MINUTES = 50

# Ordered: the symbol form wins over the spelled-out forms
_TEMPERATURE_PATTERNS: tuple[tuple[re.Pattern[str], str | None], ...] = (
    (re.compile(r"(\d{2,3})\s*°?\s*(f|c)\b", re.IGNORECASE), None),
    (re.compile(r"(\d{2,3})\s*degrees?\s*fahrenheit", re.IGNORECASE), "F"),
    (re.compile(r"(\d{2,3})\s*degrees?\s*celsius", re.IGNORECASE), "C"),
)

_WHITESPACE = re.compile(r"\s+")


def difficulty_from_minutes(minutes: int | None) -> Difficulty | None:
    """Bucket a ready time into a difficulty.

    ``None`` and zero mean "unknown" and yield ``None``.
    """
    if not minutes:
        return None
    if minutes <= EASY_MAX_MINUTES:
        return Difficulty.EASY
    if minutes <= INTERMEDIATE_MAX_MINUTES:
        return Difficulty.INTERMEDIATE
    return Difficulty.ADVANCED


def extract_temperature_hint(instructions: str | None) -> str | None:
    """Find the first oven temperature in instructions, rendered like ``350F``."""
    if not instructions:
        return None
    for pattern, unit in _TEMPERATURE_PATTERNS:
        match = pattern.search(instructions)
        if match:
            return f"{match.group(1)}{unit or match.group(2).upper()}"
    return None


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def html_to_text(value: str | None) -> str:
    """Convert an HTML fragment to a single line of plain text."""
    if not value:
        return ""
    if "<" not in value:
        return collapse_whitespace(value)
    soup = BeautifulSoup(value, "lxml")
    return collapse_whitespace(soup.get_text(" "))
