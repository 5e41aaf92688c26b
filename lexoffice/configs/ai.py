"""
AI model configuration settings.

Model tiers used for document drafting and recovery analysis, with
their generation limits and cost rates for usage accounting.

Dependencies: pydantic, pydantic_settings
System role: Text-generation model configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from lexoffice.configs.base import BaseSettings


class AISettings(BaseSettings):
    """Text-generation model configuration (standard and premium tiers)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AI_",
        case_sensitive=False,
        extra="ignore",
    )

    google_api_key: str | None = Field(
        default=None,
        description="API key for the Google Generative AI chat models",
    )

    standard_model: str = Field(default="gemini-2.5-flash", description="Standard tier model id")
    standard_max_output_tokens: int = Field(default=4096)
    standard_temperature: float = Field(default=0.3)
    standard_cost_per_mtok_in: float = Field(default=0.30, description="USD per million input tokens")
    standard_cost_per_mtok_out: float = Field(default=2.50, description="USD per million output tokens")

    premium_model: str = Field(default="gemini-2.5-pro", description="Premium tier model id")
    premium_max_output_tokens: int = Field(default=16384)
    premium_temperature: float = Field(default=0.2)
    premium_cost_per_mtok_in: float = Field(default=1.25)
    premium_cost_per_mtok_out: float = Field(default=10.0)

    request_timeout: float = Field(default=120.0, description="Model call timeout in seconds")
