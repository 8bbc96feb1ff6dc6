"""Prompt for turning a free-text recipe search into structured filters."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field

from .base import BasePrompt


class SearchIntent(BaseModel):
    """Keyword plus optional cuisine and diet extracted from a search query."""

    keyword: str = Field(default="", max_length=120, description="Core dish keyword")
    cuisine: str | None = Field(default=None, description="Cuisine, e.g. Italian")
    diet: str | None = Field(default=None, description="Diet, e.g. vegetarian")


class SearchIntentPrompt(BasePrompt[SearchIntent]):
    """Extract search intent from queries such as "quick vegan thai noodles".

    Example output:
        {"keyword": "noodles", "cuisine": "Thai", "diet": "vegan"}
    """

    output_schema: ClassVar[type[BaseModel]] = SearchIntent

    system_prompt: ClassVar[str | None] = (
        "You extract recipe search intent from a user's query. "
        'Return JSON only: {"keyword": "string", "cuisine": "string|null", '
        '"diet": "string|null"}. The keyword is the dish or main ingredient; '
        "use null when the query does not name a cuisine or diet."
    )

    temperature: ClassVar[float] = 0.2
    max_tokens: ClassVar[int | None] = 256

    def format(self, **kwargs: Any) -> str:
        query = kwargs.get("query")
        if not query:
            msg = "Missing required 'query' argument"
            raise ValueError(msg)
        return str(query)
