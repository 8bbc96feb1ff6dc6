"""Configuration module with YAML and environment variable support."""

from .settings import Settings, get_settings, has_usable_api_key


__all__ = [
    "Settings",
    "get_settings",
    "has_usable_api_key",
]
