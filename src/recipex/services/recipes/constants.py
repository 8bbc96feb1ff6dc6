"""Constants for the unified recipe layer."""

from __future__ import annotations

from typing import Final


# Hard cap on results returned by any search
MAX_RESULTS: Final[int] = 16

# Served when the secondary provider's area listing is unavailable
FALLBACK_CUISINES: Final[tuple[str, ...]] = (
    "American",
    "British",
    "Chinese",
    "French",
    "Greek",
    "Indian",
    "Italian",
    "Japanese",
    "Mexican",
    "Thai",
)

# Search terms shorter than this are too generic to be worth a request
MIN_TERM_LENGTH: Final[int] = 3

NO_RESULTS_MESSAGE: Final[str] = (
    'No results found for "{query}". '
    "Try broader keywords like chicken, pasta, curry or rice."
)
