"""LLM-assisted search intent extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from recipex.llm.exceptions import LLMError
from recipex.llm.prompts.search_intent import SearchIntent, SearchIntentPrompt
from recipex.observability.logging import get_logger


if TYPE_CHECKING:
    from recipex.llm.client.protocol import LLMClientProtocol


logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class IntentOutcome:
    """Extracted intent plus the reason the LLM was bypassed, if it failed."""

    intent: SearchIntent
    fallback_reason: str | None = None


class SearchIntentExtractor:
    """Turn free text into keyword/cuisine/diet using the text model.

    With no LLM client configured, the raw query is the keyword. LLM
    failures fall back the same way and report why.
    """

    def __init__(
        self,
        llm_client: LLMClientProtocol | None,
        *,
        model: str | None = None,
    ) -> None:
        self._llm_client = llm_client
        self._model = model
        self._prompt = SearchIntentPrompt()

    @property
    def enabled(self) -> bool:
        return self._llm_client is not None

    async def extract(self, query: str) -> IntentOutcome:
        passthrough = SearchIntent(keyword=query)
        if self._llm_client is None:
            return IntentOutcome(intent=passthrough)

        try:
            intent = await self._llm_client.generate_structured(
                prompt=self._prompt.format(query=query),
                schema=SearchIntent,
                model=self._model,
                system=self._prompt.system_prompt,
                options=self._prompt.get_options(),
            )
        except LLMError as e:
            logger.warning("Search intent extraction failed", error=str(e))
            return IntentOutcome(intent=passthrough, fallback_reason=str(e))

        logger.debug(
            "Search intent extracted",
            keyword=intent.keyword,
            cuisine=intent.cuisine,
            diet=intent.diet,
        )
        return IntentOutcome(intent=intent)
