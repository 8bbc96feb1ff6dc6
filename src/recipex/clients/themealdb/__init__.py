"""TheMealDB (secondary recipe provider) client."""

from recipex.clients.themealdb.client import TheMealDBClient


__all__ = ["TheMealDBClient"]
