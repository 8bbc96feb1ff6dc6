"""Shared HTTP plumbing for the recipe provider clients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

import httpx
import orjson
from pydantic import BaseModel, ValidationError

from recipex.clients.exceptions import (
    MalformedUpstreamError,
    ProviderNotFoundError,
    ProviderUnavailableError,
)
from recipex.observability.logging import get_logger


if TYPE_CHECKING:
    from recipex.schemas.enums import RecipeProvider


logger = get_logger(__name__)


class BaseProviderClient:
    """httpx lifecycle plus GET-and-parse with provider error mapping.

    An ``http_client`` may be injected (tests, shared pools); otherwise one
    is created on ``initialize`` and closed on ``shutdown``.
    """

    provider: ClassVar[RecipeProvider]

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = http_client
        self._owns_http_client = http_client is None

    async def initialize(self) -> None:
        """Create the HTTP client if one was not injected."""
        if self._http is None:
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"Accept": "application/json"},
            )
        logger.info(
            f"{type(self).__name__} initialized",
            base_url=self.base_url,
            timeout=self.timeout,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_http_client and self._http is not None:
            await self._http.aclose()
            self._http = None
        logger.debug(f"{type(self).__name__} shutdown")

    async def _get_model[M: BaseModel](
        self,
        path: str,
        model: type[M],
        params: dict[str, Any] | None = None,
        *,
        not_found_id: str | None = None,
    ) -> M:
        """GET ``path`` and validate the JSON body as ``model``.

        Args:
            path: Endpoint path relative to ``base_url``.
            model: Schema for the response body.
            params: Query parameters.
            not_found_id: When set, HTTP 404 raises ``ProviderNotFoundError``
                for this id instead of ``ProviderUnavailableError``.

        Raises:
            ProviderUnavailableError: Transport failure, timeout or non-2xx.
            ProviderNotFoundError: 404 for a lookup by id.
            MalformedUpstreamError: 2xx with an unparseable body.
        """
        if self._http is None:
            await self.initialize()
        assert self._http is not None

        try:
            response = await self._http.get(f"{self.base_url}{path}", params=params)
        except httpx.TimeoutException as e:
            logger.warning("Provider request timed out", provider=self.provider, path=path)
            msg = f"request timed out after {self.timeout}s"
            raise ProviderUnavailableError(self.provider, msg) from e
        except httpx.RequestError as e:
            logger.warning(
                "Provider request failed",
                provider=self.provider,
                path=path,
                error=str(e),
            )
            raise ProviderUnavailableError(self.provider, f"cannot connect: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND and not_found_id is not None:
            raise ProviderNotFoundError(self.provider, not_found_id)

        if not response.is_success:
            logger.warning(
                "Provider returned error status",
                provider=self.provider,
                path=path,
                status_code=response.status_code,
            )
            msg = f"HTTP {response.status_code}"
            raise ProviderUnavailableError(self.provider, msg)

        try:
            return model.model_validate(orjson.loads(response.content))
        except (orjson.JSONDecodeError, ValidationError) as e:
            logger.warning(
                "Provider returned malformed payload",
                provider=self.provider,
                path=path,
                error=str(e)[:300],
            )
            raise MalformedUpstreamError(self.provider, f"malformed payload: {e}") from e
