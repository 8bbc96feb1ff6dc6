"""Shopping list schemas."""

from __future__ import annotations

from pydantic import Field

from recipex.schemas.base import APIRequest, APIResponse
from recipex.schemas.enums import ResultProvider


class ShoppingListRequest(APIRequest):
    """Recipes the user wants to cook and what they already have."""

    recipe_names: list[str] = Field(default_factory=list, max_length=50)
    user_ingredients: list[str] = Field(default_factory=list, max_length=200)


class ShoppingListItem(APIResponse):
    """One thing to buy."""

    item: str
    quantity: str = ""
    unit: str = ""


class ShoppingListResponse(APIResponse):
    """Generated shopping list and who produced it."""

    shopping_list: list[ShoppingListItem] = Field(default_factory=list)
    provider: ResultProvider
    note: str | None = None
    request_id: str | None = None
