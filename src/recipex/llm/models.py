"""Request/response models for the Groq chat completions API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LLMCompletionResult(BaseModel):
    """Raw model reply plus the parsed structured output, if requested."""

    model_config = ConfigDict(frozen=True)

    raw_response: str = Field(..., description="Raw text response from LLM")
    parsed: Any | None = Field(
        default=None,
        description="Parsed structured output if schema was provided",
    )
    model: str = Field(..., description="Model that generated response")
    prompt_tokens: int | None = Field(default=None, description="Input token count")
    completion_tokens: int | None = Field(
        default=None, description="Output token count"
    )


# =============================================================================
# Groq API Models (OpenAI-compatible chat format)
# =============================================================================


class GroqMessage(BaseModel):
    """Assistant message in a Groq reply."""

    role: str = Field(..., description="Message role: system, user, or assistant")
    content: str | None = Field(default=None, description="Message content")


class GroqChatRequest(BaseModel):
    """Request body for Groq /chat/completions.

    User messages may carry a list of content parts (text plus
    ``image_url``) when targeting a vision model.
    """

    model: str = Field(..., description="Model name (e.g., 'llama-3.1-8b-instant')")
    messages: list[dict[str, Any]] = Field(..., description="Chat messages")
    response_format: dict[str, str] | None = Field(
        default=None,
        description="Response format: {'type': 'json_object'} for JSON mode",
    )
    temperature: float = Field(default=0.2, description="Sampling temperature")
    max_tokens: int | None = Field(
        default=None,
        description="Maximum tokens to generate",
    )
    stream: bool = Field(default=False, description="Whether to stream response")


class GroqUsage(BaseModel):
    """Token usage from Groq response."""

    prompt_tokens: int = Field(..., description="Input token count")
    completion_tokens: int = Field(..., description="Output token count")
    total_tokens: int = Field(..., description="Total token count")


class GroqChoice(BaseModel):
    """Single choice in Groq response."""

    index: int = Field(..., description="Choice index")
    message: GroqMessage = Field(..., description="Generated message")
    finish_reason: str | None = Field(default=None, description="Stop reason")


class GroqChatResponse(BaseModel):
    """Response from Groq /chat/completions endpoint."""

    id: str = Field(..., description="Unique response ID")
    model: str = Field(..., description="Model that generated response")
    choices: list[GroqChoice] = Field(..., description="Generated completions")
    usage: GroqUsage | None = Field(default=None, description="Token usage")
    created: int = Field(..., description="Unix timestamp of creation")
