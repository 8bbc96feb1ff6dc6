"""Pantry photo analysis.

The vision model identifies ingredients and proposes recipes; each proposal
is then matched against the recipe providers for a photo and video link.
When the model is unavailable a canned demo analysis is used instead, so
the endpoint always answers.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from recipex.llm.exceptions import LLMError
from recipex.llm.prompts.scan_analysis import ScanAnalysisPrompt, ScanAnalysisResult
from recipex.observability.logging import get_logger
from recipex.schemas.analysis import (
    AnalyzeResponse,
    DetectedDishOut,
    DetectedIngredientOut,
    RecipeMedia,
    SuggestedRecipeOut,
)
from recipex.schemas.enums import AnalysisMode, ResultProvider
from recipex.services.analysis.constants import (
    DEFAULT_RECIPE_CUISINE,
    DEMO_NOTE,
    LIVE_FAILED_NOTE,
    LIVE_NOTE,
    NOT_FOOD_NOTE,
    demo_analysis,
)


if TYPE_CHECKING:
    from recipex.llm.client.protocol import LLMClientProtocol
    from recipex.llm.prompts.scan_analysis import SuggestedRecipe
    from recipex.schemas.analysis import AnalyzeRequest
    from recipex.services.media.service import MediaEnricher


logger = get_logger(__name__)


def _clean_text(value: object) -> str:
    return str(value or "").strip()


def normalize_suggestion(recipe: SuggestedRecipe) -> SuggestedRecipe | None:
    """Fill defaults on a model-proposed recipe; drop it if it has no name."""
    name = _clean_text(recipe.name)
    if not name:
        return None
    return recipe.model_copy(
        update={
            "name": name,
            "cuisine": _clean_text(recipe.cuisine) or DEFAULT_RECIPE_CUISINE,
            "search_query": _clean_text(recipe.search_query) or name,
            "missing_ingredients": [
                text
                for text in (_clean_text(item) for item in recipe.missing_ingredients)
                if text
            ],
        }
    )


class ScanAnalysisService:
    """Analyze pantry photos with the vision model, falling back to demo data."""

    def __init__(
        self,
        llm_client: LLMClientProtocol | None,
        enricher: MediaEnricher,
        *,
        model: str | None = None,
    ) -> None:
        self._llm_client = llm_client
        self._enricher = enricher
        self._model = model
        self._prompt = ScanAnalysisPrompt()

    async def analyze(self, request: AnalyzeRequest) -> AnalyzeResponse:
        """Analyze ``request.image_base64``; the caller ensures it is present."""
        analysis: ScanAnalysisResult | None = None
        mode = AnalysisMode.DEMO
        provider = ResultProvider.DEMO
        note: str | None = None

        if self._llm_client is not None:
            try:
                analysis = await self._run_model(request)
            except LLMError as e:
                logger.warning("Scan analysis fell back to demo", error=str(e))
                note = LIVE_FAILED_NOTE.format(error=e)
            else:
                mode = AnalysisMode.LIVE
                provider = ResultProvider.GROQ
                note = LIVE_NOTE

        if analysis is None:
            analysis = demo_analysis(request.cuisines[0] if request.cuisines else None)
            note = note or DEMO_NOTE

        if analysis.detected_dish is not None and not analysis.detected_dish.is_food:
            analysis = analysis.model_copy(
                update={"detected_ingredients": [], "recipes": []}
            )
            note = f"{note} {NOT_FOOD_NOTE}" if note else NOT_FOOD_NOTE

        suggestions = [
            normalized
            for normalized in (normalize_suggestion(r) for r in analysis.recipes)
            if normalized is not None
        ]
        media = await asyncio.gather(
            *(self._media_for(s.search_query or s.name) for s in suggestions)
        )

        logger.info(
            "Scan analysis complete",
            mode=mode,
            ingredient_count=len(analysis.detected_ingredients),
            recipe_count=len(suggestions),
        )
        return AnalyzeResponse(
            detected_dish=(
                DetectedDishOut.model_validate(analysis.detected_dish.model_dump())
                if analysis.detected_dish is not None
                else None
            ),
            detected_ingredients=[
                DetectedIngredientOut.model_validate(item.model_dump())
                for item in analysis.detected_ingredients
            ],
            recipes=[
                SuggestedRecipeOut.model_validate(
                    {**suggestion.model_dump(), "media": recipe_media}
                )
                for suggestion, recipe_media in zip(suggestions, media, strict=True)
            ],
            mode=mode,
            provider=provider,
            note=note,
        )

    async def _run_model(self, request: AnalyzeRequest) -> ScanAnalysisResult:
        assert self._llm_client is not None
        filters = request.filters
        return await self._llm_client.generate_structured(
            prompt=self._prompt.format(
                cuisines=request.cuisines,
                diet=filters.diet if filters else None,
                max_time=filters.max_time if filters else None,
                difficulty=filters.difficulty if filters else None,
            ),
            schema=ScanAnalysisResult,
            model=self._model,
            system=self._prompt.system_prompt,
            options=self._prompt.get_options(),
            image_base64=request.image_base64,
        )

    async def _media_for(self, text: str) -> RecipeMedia:
        """Enrich one suggestion; a failure here only blanks that suggestion's media."""
        try:
            return await self._enricher.enrich(text)
        except Exception as e:
            logger.opt(exception=e).warning("Media enrichment failed", query=text)
            return RecipeMedia()
