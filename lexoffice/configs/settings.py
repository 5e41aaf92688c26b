"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from lexoffice.configs.ai import AISettings
from lexoffice.configs.base import BaseSettings
from lexoffice.configs.database import DatabaseSettings
from lexoffice.configs.observability import ObservabilitySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    holiday_cache_ttl_seconds: int = Field(
        default=300,
        description="How long a (year, state) holiday set stays cached",
    )

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    ai: AISettings = Field(default_factory=AISettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from lexoffice.configs import get_settings
        settings = get_settings()
    """
    return Settings()
