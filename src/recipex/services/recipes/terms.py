"""Search term expansion for the secondary provider's name search."""

from __future__ import annotations

from recipex.services.recipes.constants import MIN_TERM_LENGTH


def expand_search_terms(text: str) -> list[str]:
    """Split a query into the terms worth searching individually.

    The full trimmed query comes first, followed by each whitespace-separated
    word lower-cased with non-alphanumeric characters removed. Words shorter
    than three characters are dropped and duplicates are removed, keeping
    first occurrence.

    >>> expand_search_terms("  Chicken & rice-bowl ")
    ['Chicken & rice-bowl', 'chicken', 'ricebowl']
    """
    trimmed = text.strip()
    if not trimmed:
        return []

    words = (
        "".join(ch for ch in word.lower() if ch.isalnum()) for word in trimmed.split()
    )
    tokens = [word for word in words if len(word) >= MIN_TERM_LENGTH]
    return list(dict.fromkeys([trimmed, *tokens]))
