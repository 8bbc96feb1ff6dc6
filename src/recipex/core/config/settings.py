"""Application configuration using Pydantic Settings with YAML support.

This module provides centralized configuration management with:
- YAML-based configuration files organized by domain
- Environment-specific overrides (development, test, production)
- Environment variable loading for provider secrets
- Type validation and coercion
- Caching for performance
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


# Keys shorter than this are treated as unset; real provider keys are longer.
MIN_API_KEY_LENGTH = 20

_PLACEHOLDER_MARKERS = ("...", "your_")


def has_usable_api_key(value: str | None) -> bool:
    """Check that an API key looks real rather than a template placeholder.

    A key is usable when it is present, contains neither ``...`` nor
    ``your_`` (case-insensitive), and is longer than 20 characters.
    """
    if not value:
        return False
    lowered = value.lower()
    if any(marker in lowered for marker in _PLACEHOLDER_MARKERS):
        return False
    return len(value) > MIN_API_KEY_LENGTH


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Recipex API"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Server configuration settings."""

    host: str = "127.0.0.1"
    port: int = 4000


class ApiSettings(BaseModel):
    """API configuration settings."""

    prefix: str = "/api"
    # Empty allows any origin; a non-empty list is an exact allowlist
    cors_origins: list[str] = []


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


class SpoonacularSettings(BaseModel):
    """Spoonacular (primary recipe provider) client configuration."""

    url: str = "https://api.spoonacular.com"
    timeout: float = 10.0


class TheMealDBSettings(BaseModel):
    """TheMealDB (secondary recipe provider) client configuration."""

    url: str = "https://www.themealdb.com/api/json/v1/1"
    timeout: float = 10.0


class ProvidersSettings(BaseModel):
    """Configuration for the third-party recipe providers."""

    spoonacular: SpoonacularSettings = SpoonacularSettings()
    themealdb: TheMealDBSettings = TheMealDBSettings()


class GroqSettings(BaseModel):
    """Groq LLM service configuration."""

    url: str = "https://api.groq.com/openai/v1"
    text_model: str = "llama-3.1-8b-instant"
    vision_model: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    timeout: float = 30.0
    max_retries: int = 2
    requests_per_minute: float = 30.0  # Groq free tier rate limit


class LLMSettings(BaseModel):
    """LLM configuration settings."""

    enabled: bool = True
    groq: GroqSettings = GroqSettings()


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support.

    Configuration is loaded from multiple sources with the following priority
    (highest to lowest):
    1. Environment variables
    2. .env file (secrets only)
    3. Environment-specific YAML files (config/environments/{APP_ENV}/)
    4. Base YAML files (config/base/)
    5. Default values in code

    Environment variables can override any setting using the nested delimiter '__'.
    For example: PROVIDERS__THEMEALDB__TIMEOUT=5 overrides
    providers.themealdb.timeout.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    # =========================================================================
    # Environment Selection (from .env)
    # =========================================================================
    APP_ENV: str = "development"

    # =========================================================================
    # Nested Configuration Sections (from YAML)
    # =========================================================================
    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    logging: LoggingSettings = LoggingSettings()
    providers: ProvidersSettings = ProvidersSettings()
    llm: LLMSettings = LLMSettings()

    # =========================================================================
    # Secrets (from .env only - never in YAML)
    # =========================================================================
    SPOONACULAR_API_KEY: str = ""
    GROQ_API_KEY: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings loading order.

        Priority (highest to lowest):
        1. init_settings - Values passed to Settings()
        2. env_settings - Environment variables
        3. dotenv_settings - .env file (secrets)
        4. yaml_settings - YAML files (base + environment)
        5. file_secret_settings - Docker secrets
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # =========================================================================
    # Computed Fields
    # =========================================================================

    @property
    def spoonacular_configured(self) -> bool:
        """Whether the primary recipe provider may be called."""
        return has_usable_api_key(self.SPOONACULAR_API_KEY)

    @property
    def groq_configured(self) -> bool:
        """Whether LLM features run live instead of in demo mode."""
        return self.llm.enabled and has_usable_api_key(self.GROQ_API_KEY)

    # =========================================================================
    # Environment Helpers
    # =========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_non_production(self) -> bool:
        """Check if running in a non-production environment.

        Returns True for local, test, and development environments where
        API documentation and detailed error messages should be enabled.
        """
        return self.APP_ENV in ("local", "test", "development")

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Using lru_cache ensures settings are only loaded once,
    improving performance and consistency.
    """
    return Settings()
