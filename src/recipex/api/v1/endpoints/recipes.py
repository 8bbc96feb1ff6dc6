"""Recipe endpoints.

Provides:
- GET /cuisines for the cuisine picker
- GET /search for free-text discovery with optional intent extraction
- GET /recipes for plain unified search
- GET /recipes/{recipe_id} for a single recipe from either provider
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from recipex.api.dependencies import (
    get_aggregator,
    get_discovery_service,
    get_request_id,
)
from recipex.clients.exceptions import ProviderError
from recipex.core.exceptions import NotFoundError
from recipex.observability.logging import get_logger
from recipex.schemas.recipe import (
    CuisineListResponse,
    RecipeDetailResponse,
    RecipeSearchResponse,
    SearchQuery,
)
from recipex.services.recipes import RecipeAggregator, RecipeDiscoveryService
from recipex.services.recipes.constants import FALLBACK_CUISINES


logger = get_logger(__name__)

router = APIRouter(tags=["Recipes"])

RequestId = Annotated[str | None, Depends(get_request_id)]
CuisineFilter = Annotated[
    str | None, Query(description="Cuisine or area, e.g. Italian")
]
DietFilter = Annotated[str | None, Query(description="Diet, e.g. vegetarian")]
MaxTimeFilter = Annotated[
    int | None,
    Query(alias="maxTime", ge=1, description="Maximum ready time in minutes"),
]


@router.get(
    "/cuisines",
    response_model=CuisineListResponse,
    summary="List cuisines",
    description="Cuisine names known to TheMealDB, or a fixed list if it is down.",
)
async def list_cuisines(
    aggregator: Annotated[RecipeAggregator, Depends(get_aggregator)],
    request_id: RequestId,
) -> CuisineListResponse:
    try:
        cuisines = await aggregator.list_cuisines()
    except ProviderError as e:
        logger.warning("Cuisine listing unavailable, using fallback", error=str(e))
        cuisines = list(FALLBACK_CUISINES)
    return CuisineListResponse(cuisines=cuisines, request_id=request_id)


@router.get(
    "/search",
    response_model=RecipeSearchResponse,
    summary="Discover recipes from free text",
    description=(
        "Extracts keyword, cuisine and diet from the query with Groq when it "
        "is configured, then searches both providers. Explicit filters win "
        "over extracted ones."
    ),
)
async def search_recipes(
    discovery: Annotated[RecipeDiscoveryService, Depends(get_discovery_service)],
    request_id: RequestId,
    q: Annotated[str, Query(max_length=200, description="Free-text query")] = "",
    cuisine: CuisineFilter = None,
    diet: DietFilter = None,
    max_time: MaxTimeFilter = None,
) -> RecipeSearchResponse:
    result = await discovery.discover(
        q, cuisine=cuisine, diet=diet, max_time=max_time
    )
    return RecipeSearchResponse(
        results=result.results,
        message=result.message,
        note=result.note,
        request_id=request_id,
    )


@router.get(
    "/recipes",
    response_model=RecipeSearchResponse,
    summary="Search recipes",
    description="Unified search across Spoonacular and TheMealDB.",
)
async def list_recipes(
    aggregator: Annotated[RecipeAggregator, Depends(get_aggregator)],
    request_id: RequestId,
    q: Annotated[str, Query(max_length=200, description="Search text")] = "chicken",
    cuisine: CuisineFilter = None,
    diet: DietFilter = None,
    max_time: MaxTimeFilter = None,
) -> RecipeSearchResponse:
    text = q.strip() or "chicken"
    results = await aggregator.search(
        SearchQuery(text=text, cuisine=cuisine, diet=diet, max_time=max_time)
    )
    return RecipeSearchResponse(results=results, request_id=request_id)


@router.get(
    "/recipes/{recipe_id}",
    response_model=RecipeDetailResponse,
    summary="Get a recipe",
    description="Full recipe by unified id (``spoon-<n>`` or a TheMealDB id).",
    responses={404: {"description": "Recipe not found"}},
)
async def get_recipe(
    aggregator: Annotated[RecipeAggregator, Depends(get_aggregator)],
    request_id: RequestId,
    recipe_id: Annotated[str, Path(min_length=1, max_length=64)],
) -> RecipeDetailResponse:
    """Fetch one recipe.

    Unknown ids, malformed ids and provider outages all produce a 404.
    """
    recipe = await aggregator.get_detail(recipe_id)
    if recipe is None:
        raise NotFoundError("Recipe", recipe_id)
    return RecipeDetailResponse(recipe=recipe, request_id=request_id)
