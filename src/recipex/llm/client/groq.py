"""HTTP client for the Groq LLM service.

Groq exposes an OpenAI-compatible chat completions API. The client is used
for three things: extracting search intent from free text, analyzing pantry
photos with a vision model, and generating shopping lists.
"""

from __future__ import annotations

import re
from typing import Any, TypeVar, cast

import httpx
from aiolimiter import AsyncLimiter
from pydantic import BaseModel, ValidationError

from recipex.llm.exceptions import (
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from recipex.llm.models import (
    GroqChatRequest,
    GroqChatResponse,
    LLMCompletionResult,
)
from recipex.observability.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

_CODE_FENCE_START = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CODE_FENCE_END = re.compile(r"\s*```$")


def extract_json_payload(text: str) -> str:
    """Pull the JSON object out of a model reply.

    Models occasionally wrap JSON in Markdown fences or add a sentence
    before it even in JSON mode. Fences are stripped and, when the reply is
    not a bare object, the outermost ``{...}`` span is returned.
    """
    cleaned = _CODE_FENCE_END.sub("", _CODE_FENCE_START.sub("", text.strip()))
    if cleaned.startswith("{") and cleaned.endswith("}"):
        return cleaned
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        return cleaned[start : end + 1]
    return cleaned


def image_data_url(image_base64: str) -> str:
    """Return a data URL for a base64 image, accepting one already prefixed."""
    if image_base64.startswith("data:"):
        return image_base64
    return f"data:image/jpeg;base64,{image_base64}"


class GroqClient:
    """Async HTTP client for Groq chat completions.

    Requests are paced with an ``aiolimiter`` limiter to respect the account's
    requests-per-minute quota. Timeouts and connection errors are retried up
    to ``max_retries`` times; HTTP error statuses are not.

    Attributes:
        base_url: Groq API base URL.
        model: Default model (e.g., llama-3.1-8b-instant).
        timeout: HTTP request timeout in seconds.
        max_retries: Maximum retry attempts for transient failures.
    """

    DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"

    def __init__(
        self,
        api_key: str,
        model: str = "llama-3.1-8b-instant",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        max_retries: int = 2,
        requests_per_minute: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Groq client.

        Args:
            api_key: Groq API key for bearer authentication.
            model: Default model name.
            base_url: Groq API base URL.
            timeout: HTTP request timeout in seconds.
            max_retries: Maximum retries for transient failures.
            requests_per_minute: Request pacing; 30 matches the free tier.
            http_client: Optional pre-built client, e.g. for tests.
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self._http_client = http_client
        self._owns_http_client = http_client is None
        # One request per (60/rpm) seconds so the quota is never hit in a burst
        self._rate_limiter = AsyncLimiter(1, 60.0 / requests_per_minute)

    @property
    def chat_url(self) -> str:
        """Get the chat completions endpoint URL."""
        return f"{self.base_url}/chat/completions"

    async def initialize(self) -> None:
        """Create the HTTP client with auth headers if one was not injected."""
        if self._http_client is not None:
            return

        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
        )
        logger.info("GroqClient initialized", model=self.model, timeout=self.timeout)

    async def shutdown(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
        self._http_client = None
        logger.debug("GroqClient shutdown")

    async def _execute_with_retry(
        self,
        request: GroqChatRequest,
    ) -> GroqChatResponse:
        """Send the request, retrying timeouts and connection errors."""
        if self._http_client is None:
            await self.initialize()
        assert self._http_client is not None

        last_exception: Exception | None = None

        for attempt in range(self.max_retries + 1):
            await self._rate_limiter.acquire()

            try:
                response = await self._http_client.post(
                    self.chat_url,
                    json=request.model_dump(exclude_none=True),
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )

                if response.status_code == 429:
                    retry_after = response.headers.get("retry-after", "60")
                    msg = f"Groq rate limit exceeded, retry after {retry_after}s"
                    raise LLMRateLimitError(msg)

                response.raise_for_status()
                return GroqChatResponse.model_validate(response.json())

            except httpx.TimeoutException as e:
                last_exception = e
                logger.warning(
                    "Groq request timeout",
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                    timeout=self.timeout,
                )
                if attempt < self.max_retries:
                    continue
                msg = f"Groq timeout after {self.timeout}s"
                raise LLMTimeoutError(msg) from e

            except httpx.HTTPStatusError as e:
                logger.warning(
                    "Groq request failed",
                    status_code=e.response.status_code,
                    url=self.chat_url,
                )
                msg = f"Groq returned {e.response.status_code}"
                raise LLMResponseError(msg) from e

            except httpx.RequestError as e:
                last_exception = e
                logger.warning(
                    "Groq connection error",
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                    error=str(e),
                )
                if attempt < self.max_retries:
                    continue
                msg = f"Cannot connect to Groq: {e}"
                raise LLMUnavailableError(msg) from e

            except ValidationError as e:
                msg = f"Unexpected Groq response shape: {e}"
                raise LLMResponseError(msg) from e

        msg = "Max retries exceeded"
        raise LLMUnavailableError(msg) from last_exception

    def _build_messages(
        self,
        prompt: str,
        system: str | None,
        schema: type[BaseModel] | None,
        image_base64: str | None,
    ) -> list[dict[str, Any]]:
        messages: list[dict[str, Any]] = []

        system_content = system or ""
        if schema is not None:
            schema_instruction = (
                "You must respond with valid JSON matching this schema: "
                f"{schema.model_json_schema()}"
            )
            system_content = (
                f"{system_content}\n\n{schema_instruction}"
                if system_content
                else schema_instruction
            )
        if system_content:
            messages.append({"role": "system", "content": system_content})

        if image_base64:
            messages.append(
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {
                            "type": "image_url",
                            "image_url": {"url": image_data_url(image_base64)},
                        },
                    ],
                }
            )
        else:
            messages.append({"role": "user", "content": prompt})
        return messages

    async def generate(
        self,
        prompt: str,
        *,
        model: str | None = None,
        system: str | None = None,
        schema: type[T] | None = None,
        options: dict[str, Any] | None = None,
        image_base64: str | None = None,
    ) -> LLMCompletionResult:
        """Generate a chat completion from Groq.

        Args:
            prompt: User message text.
            model: Model to use (defaults to the client's model).
            system: Optional system prompt.
            schema: Optional Pydantic model; enables JSON mode and parsing.
            options: ``temperature`` and ``max_tokens`` overrides.
            image_base64: Optional base64 image for vision models.

        Returns:
            LLMCompletionResult with raw response and optionally parsed output.

        Raises:
            LLMUnavailableError: If Groq cannot be reached.
            LLMTimeoutError: If request times out.
            LLMRateLimitError: If Groq answers 429.
            LLMResponseError: If Groq returns an error or an empty reply.
            LLMValidationError: If response doesn't match schema.
        """
        options = options or {}
        request = GroqChatRequest(
            model=model or self.model,
            messages=self._build_messages(prompt, system, schema, image_base64),
            response_format={"type": "json_object"} if schema is not None else None,
            temperature=options.get("temperature", 0.2),
            max_tokens=options.get("max_tokens"),
        )

        response = await self._execute_with_retry(request)

        if not response.choices or not (response.choices[0].message.content or "").strip():
            msg = "Empty Groq response"
            raise LLMResponseError(msg)
        raw_response = (response.choices[0].message.content or "").strip()

        parsed: Any = None
        if schema is not None:
            try:
                parsed = schema.model_validate_json(extract_json_payload(raw_response))
            except ValidationError as e:
                logger.warning(
                    "Failed to parse structured Groq output",
                    schema=schema.__name__,
                    error=str(e),
                    raw_response=raw_response[:500],
                )
                msg = f"Response does not match {schema.__name__} schema: {e}"
                raise LLMValidationError(msg) from e

        return LLMCompletionResult(
            raw_response=raw_response,
            parsed=parsed,
            model=response.model,
            prompt_tokens=response.usage.prompt_tokens if response.usage else None,
            completion_tokens=(
                response.usage.completion_tokens if response.usage else None
            ),
        )

    async def generate_structured(
        self,
        prompt: str,
        schema: type[T],
        *,
        model: str | None = None,
        system: str | None = None,
        options: dict[str, Any] | None = None,
        image_base64: str | None = None,
    ) -> T:
        """Generate output parsed into ``schema`` and return it directly.

        Raises:
            LLMValidationError: If response doesn't match schema.
        """
        result = await self.generate(
            prompt=prompt,
            model=model,
            system=system,
            schema=schema,
            options=options,
            image_base64=image_base64,
        )

        if result.parsed is None:
            msg = "Structured generation returned no parsed result"
            raise LLMValidationError(msg)

        return cast("T", result.parsed)
