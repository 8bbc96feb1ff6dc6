"""API and downstream schemas."""

from recipex.schemas.analysis import (
    AnalyzeFilters,
    AnalyzeRequest,
    AnalyzeResponse,
    DetectedDishOut,
    DetectedIngredientOut,
    RecipeMedia,
    SuggestedRecipeOut,
)
from recipex.schemas.base import APIRequest, APIResponse, DownstreamResponse
from recipex.schemas.enums import (
    AnalysisMode,
    Difficulty,
    HealthStatus,
    RecipeProvider,
    ResultProvider,
)
from recipex.schemas.health import HealthCheckResponse, ProviderStatus
from recipex.schemas.recipe import (
    CuisineListResponse,
    RecipeDetail,
    RecipeDetailResponse,
    RecipeSearchResponse,
    RecipeSummary,
    SearchQuery,
)
from recipex.schemas.shopping import (
    ShoppingListItem,
    ShoppingListRequest,
    ShoppingListResponse,
)


__all__ = [
    "APIRequest",
    "APIResponse",
    "AnalysisMode",
    "AnalyzeFilters",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "CuisineListResponse",
    "DetectedDishOut",
    "DetectedIngredientOut",
    "Difficulty",
    "DownstreamResponse",
    "HealthCheckResponse",
    "HealthStatus",
    "ProviderStatus",
    "RecipeDetail",
    "RecipeDetailResponse",
    "RecipeMedia",
    "RecipeProvider",
    "RecipeSearchResponse",
    "RecipeSummary",
    "ResultProvider",
    "SearchQuery",
    "ShoppingListItem",
    "ShoppingListRequest",
    "ShoppingListResponse",
    "SuggestedRecipeOut",
]
