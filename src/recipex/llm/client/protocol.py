"""Interface the LLM-backed services depend on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel


if TYPE_CHECKING:
    from recipex.llm.models import LLMCompletionResult


T = TypeVar("T", bound=BaseModel)


@runtime_checkable
class LLMClientProtocol(Protocol):
    """Async chat-completion client with optional structured output.

    Implementations raise subclasses of ``LLMError`` on failure.
    """

    async def initialize(self) -> None: ...

    async def shutdown(self) -> None: ...

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
        """Generate a completion; parse it into ``schema`` when given."""
        ...

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
        """Generate a completion and return the parsed ``schema`` instance."""
        ...
