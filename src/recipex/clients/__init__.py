"""Clients for the third-party recipe providers."""

from recipex.clients.exceptions import (
    MalformedUpstreamError,
    ProviderError,
    ProviderNotFoundError,
    ProviderUnavailableError,
)
from recipex.clients.protocol import RecipeProviderProtocol
from recipex.clients.spoonacular import SpoonacularClient
from recipex.clients.themealdb import TheMealDBClient


__all__ = [
    "MalformedUpstreamError",
    "ProviderError",
    "ProviderNotFoundError",
    "ProviderUnavailableError",
    "RecipeProviderProtocol",
    "SpoonacularClient",
    "TheMealDBClient",
]
