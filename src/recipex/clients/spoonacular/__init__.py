"""Spoonacular (primary recipe provider) client."""

from recipex.clients.spoonacular.client import SpoonacularClient


__all__ = ["SpoonacularClient"]
