"""
Observability configuration settings.

Settings for logging and request tracing.

Dependencies: pydantic_settings
System role: Logging configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from lexoffice.configs.base import BaseSettings


class ObservabilitySettings(BaseSettings):
    """Logging and request tracing configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OBSERVABILITY_",
        case_sensitive=False,
        extra="ignore",
    )

    log_requests: bool = Field(
        default=True,
        description="Log every HTTP request with status and latency",
    )
    slow_request_ms: float = Field(
        default=2000.0,
        description="Requests slower than this are logged at WARNING",
    )
    unlogged_paths: list[str] = Field(
        default_factory=lambda: ["/api/v1/health"],
        description="Path prefixes excluded from request logging (health checks)",
    )
    correlation_header: str = Field(
        default="X-Correlation-ID",
        description="Header used to propagate the correlation ID",
    )
    quiet_loggers: list[str] = Field(
        default_factory=lambda: ["urllib3", "httpx", "httpcore", "sqlalchemy.engine"],
        description="Third-party loggers lowered to WARNING",
    )
