"""External video-search link synthesis."""

from __future__ import annotations

import re
from urllib.parse import quote


VIDEO_SEARCH_URL = "https://www.youtube.com/results?search_query="
DEFAULT_VIDEO_PHRASE = "easy cooking"

# Placeholder words that leak in when callers stringify missing values
_PLACEHOLDER_WORDS = re.compile(r"\b(?:undefined|null)\b", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")

# Characters JavaScript's encodeURIComponent leaves alone besides alphanumerics
# and "-_.~", which quote() already keeps.
_URI_COMPONENT_SAFE = "!*'()"


def clean_video_phrase(text: str | None) -> str:
    """Drop placeholder words and surrounding whitespace from a search phrase."""
    cleaned = _PLACEHOLDER_WORDS.sub("", text or "")
    return _WHITESPACE.sub(" ", cleaned).strip()


def build_video_search_url(text: str | None) -> str:
    """Build a deterministic video-search URL for ``"<text> recipe"``.

    >>> build_video_search_url("zzz-no-match")
    'https://www.youtube.com/results?search_query=zzz-no-match%20recipe'
    """
    phrase = clean_video_phrase(text) or DEFAULT_VIDEO_PHRASE
    return VIDEO_SEARCH_URL + quote(f"{phrase} recipe", safe=_URI_COMPONENT_SAFE)
