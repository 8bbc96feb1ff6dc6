"""Shopping list generation with a demo fallback."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipex.llm.exceptions import LLMError
from recipex.llm.prompts.shopping_list import ShoppingListPrompt, ShoppingListResult
from recipex.observability.logging import get_logger
from recipex.schemas.enums import ResultProvider
from recipex.schemas.shopping import ShoppingListItem, ShoppingListResponse
from recipex.services.shopping.constants import DEMO_NOTE, DEMO_SHOPPING_ITEMS


if TYPE_CHECKING:
    from recipex.llm.client.protocol import LLMClientProtocol


logger = get_logger(__name__)


class ShoppingListService:
    """Build a shopping list for a set of recipes.

    Uses the LLM when one is configured. Otherwise, or when the LLM call
    fails, returns a fixed demo list minus anything already in the pantry.
    """

    def __init__(
        self,
        llm_client: LLMClientProtocol | None,
        *,
        model: str | None = None,
    ) -> None:
        self._llm_client = llm_client
        self._model = model
        self._prompt = ShoppingListPrompt()

    async def generate(
        self,
        recipe_names: list[str],
        user_ingredients: list[str],
    ) -> ShoppingListResponse:
        failure: str | None = None

        if self._llm_client is not None:
            try:
                result = await self._llm_client.generate_structured(
                    prompt=self._prompt.format(
                        recipe_names=recipe_names,
                        user_ingredients=user_ingredients,
                    ),
                    schema=ShoppingListResult,
                    model=self._model,
                    system=self._prompt.system_prompt,
                    options=self._prompt.get_options(),
                )
            except LLMError as e:
                failure = str(e)
                logger.warning(
                    "Shopping list generation fell back to demo", error=failure
                )
            else:
                logger.info("Shopping list generated", item_count=len(result.items))
                return ShoppingListResponse(
                    shopping_list=[
                        ShoppingListItem.model_validate(item.model_dump())
                        for item in result.items
                    ],
                    provider=ResultProvider.GROQ,
                )

        return self.demo_list(user_ingredients, failure)

    def demo_list(
        self,
        user_ingredients: list[str],
        failure: str | None = None,
    ) -> ShoppingListResponse:
        """Demo items the pantry does not already cover (case-insensitive)."""
        pantry = {ingredient.strip().lower() for ingredient in user_ingredients}
        items = [
            ShoppingListItem.model_validate(item.model_dump())
            for item in DEMO_SHOPPING_ITEMS
            if item.item.lower() not in pantry
        ]
        note = f"{DEMO_NOTE} Groq error: {failure}" if failure else DEMO_NOTE
        return ShoppingListResponse(
            shopping_list=items,
            provider=ResultProvider.DEMO,
            note=note,
        )
