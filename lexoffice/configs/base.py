"""
Shared settings base.

Every config module reads the same .env file; prefixed modules (database,
AI, observability) override env_prefix on top of these defaults.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic_settings import SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings read from LEXOFFICE_* variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LEXOFFICE_",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="development, staging or production; production hides the OpenAPI docs",
    )
    debug: bool = Field(default=False, description="FastAPI debug mode")
    log_level: str = Field(default="INFO", description="Root logger level")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"
