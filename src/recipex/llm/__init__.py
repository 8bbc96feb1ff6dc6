"""LLM integration: Groq chat client, prompts and error types."""

from recipex.llm.client.groq import GroqClient
from recipex.llm.exceptions import (
    LLMError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from recipex.llm.models import LLMCompletionResult
from recipex.llm.prompts.base import BasePrompt


__all__ = [
    "BasePrompt",
    "GroqClient",
    "LLMCompletionResult",
    "LLMError",
    "LLMRateLimitError",
    "LLMResponseError",
    "LLMTimeoutError",
    "LLMUnavailableError",
    "LLMValidationError",
]
