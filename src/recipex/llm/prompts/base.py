"""Base class for LLM prompts.

A prompt bundles the system instruction, the user-message template, the
Pydantic schema the reply must satisfy, and the sampling options.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel


class BasePrompt[T: BaseModel](ABC):
    """Base class for all LLM prompts.

    Example:
        ```python
        class DishNamePrompt(BasePrompt[DishName]):
            output_schema = DishName
            system_prompt = "You name dishes."

            def format(self, **kwargs: Any) -> str:
                return f"Name this dish: {kwargs['description']}"
        ```
    """

    output_schema: ClassVar[type[BaseModel]]
    """Pydantic model the reply is validated against."""

    system_prompt: ClassVar[str | None] = None
    """Optional system prompt to set context for the LLM."""

    temperature: ClassVar[float] = 0.2
    """Sampling temperature (low = more deterministic)."""

    max_tokens: ClassVar[int | None] = None
    """Maximum tokens to generate (None = model default)."""

    @abstractmethod
    def format(self, **kwargs: Any) -> str:
        """Render the user message from input variables.

        Raises:
            ValueError: If required variables are missing.
        """
        ...

    @property
    def name(self) -> str:
        """Prompt identifier for logging."""
        return self.__class__.__name__

    def get_options(self) -> dict[str, Any]:
        """Sampling options passed through to the LLM client."""
        options: dict[str, Any] = {"temperature": self.temperature}
        if self.max_tokens is not None:
            options["max_tokens"] = self.max_tokens
        return options
