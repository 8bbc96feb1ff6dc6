"""Demo data for shopping list generation."""

from __future__ import annotations

from typing import Final

from recipex.llm.prompts.shopping_list import ShoppingItem


DEMO_SHOPPING_ITEMS: Final[tuple[ShoppingItem, ...]] = (
    ShoppingItem(item="olive oil", quantity="1", unit="bottle"),
    ShoppingItem(item="garlic", quantity="1", unit="pack"),
    ShoppingItem(item="cumin powder", quantity="1", unit="jar"),
    ShoppingItem(item="yogurt", quantity="500", unit="g"),
)

DEMO_NOTE: Final[str] = "Demo mode list generated because Groq is unavailable."
