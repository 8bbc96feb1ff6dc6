"""Shopping list endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipex.api.dependencies import get_request_id, get_shopping_service
from recipex.schemas.shopping import ShoppingListRequest, ShoppingListResponse
from recipex.services.shopping import ShoppingListService


router = APIRouter(tags=["Shopping"])


@router.post(
    "/shopping-list",
    response_model=ShoppingListResponse,
    summary="Build a shopping list",
    description="Items needed for the given recipes, minus the user's pantry.",
)
async def create_shopping_list(
    body: ShoppingListRequest,
    service: Annotated[ShoppingListService, Depends(get_shopping_service)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> ShoppingListResponse:
    response = await service.generate(body.recipe_names, body.user_ingredients)
    return response.model_copy(update={"request_id": request_id})
