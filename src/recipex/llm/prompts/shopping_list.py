"""Prompt for generating a shopping list from recipe names and a pantry."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, Field

from .base import BasePrompt


def _as_text(value: Any) -> str:
    """Models sometimes emit quantities as numbers."""
    if value is None:
        return ""
    return str(value).strip()


class ShoppingItem(BaseModel):
    """One line of a shopping list."""

    item: str = Field(..., min_length=1, description="Ingredient to buy")
    quantity: Annotated[str, BeforeValidator(_as_text)] = ""
    unit: Annotated[str, BeforeValidator(_as_text)] = ""


class ShoppingListResult(BaseModel):
    """Output schema for shopping list generation."""

    items: list[ShoppingItem] = Field(default_factory=list)


class ShoppingListPrompt(BasePrompt[ShoppingListResult]):
    """Generate a deduplicated shopping list.

    Example output:
        {"items": [{"item": "garlic", "quantity": "1", "unit": "bulb"}]}
    """

    output_schema: ClassVar[type[BaseModel]] = ShoppingListResult

    system_prompt: ClassVar[str | None] = (
        "You generate a deduplicated grocery shopping list for the given recipes, "
        "leaving out anything the user already has. Return JSON only: "
        '{"items": [{"item": "string", "quantity": "string", "unit": "string"}]}'
    )

    temperature: ClassVar[float] = 0.2
    max_tokens: ClassVar[int | None] = 512

    def format(self, **kwargs: Any) -> str:
        recipe_names = kwargs.get("recipe_names") or []
        user_ingredients = kwargs.get("user_ingredients") or []
        recipes = ", ".join(recipe_names) or "none"
        pantry = ", ".join(user_ingredients) or "nothing"
        return f"Recipes: {recipes}. User has: {pantry}."
