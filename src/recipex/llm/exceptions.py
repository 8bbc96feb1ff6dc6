"""LLM client exceptions.

Services catch ``LLMError`` and degrade to demo output; nothing in this
hierarchy is rendered to API callers directly.
"""

from __future__ import annotations


class LLMError(Exception):
    """Base exception for LLM client errors."""


class LLMUnavailableError(LLMError):
    """The LLM service could not be reached after all retries."""


class LLMTimeoutError(LLMUnavailableError):
    """An LLM request exceeded its deadline."""


class LLMResponseError(LLMError):
    """The LLM service answered with a non-success HTTP status."""


class LLMValidationError(LLMError):
    """The model's reply could not be parsed into the expected schema."""


class LLMRateLimitError(LLMError):
    """The LLM service rejected the request with HTTP 429."""
