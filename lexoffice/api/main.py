"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, lexoffice.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lexoffice.api.deps.dependencies import get_service_cache
from lexoffice.configs import get_settings
from lexoffice.observability import configure_logging
from lexoffice.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    activities_router,
    calendar_router,
    cases_router,
    creditors_router,
    deadlines_router,
    drafting_router,
    financial_router,
    health_router,
    holidays_router,
    library_router,
    patrimony_router,
    persons_router,
    projects_router,
    recovery_router,
    team_router,
    users_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.observability.quiet_loggers)
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    # Model clients are created lazily on first generation
    _ = cache.model_configs
    _ = cache.writer
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="LexOffice API",
        description="Practice management for law firms: cases, deadlines, recovery and AI drafting",
        version="0.1.0",
        debug=settings.debug,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-AI-Model", "X-AI-Tier", settings.observability.correlation_header],
    )

    # Add observability middleware; the correlation ID is set before requests are logged
    if settings.observability.log_requests:
        app.add_middleware(
            RequestLoggingMiddleware,
            slow_request_ms=settings.observability.slow_request_ms,
            unlogged_paths=settings.observability.unlogged_paths,
        )
    app.add_middleware(CorrelationMiddleware, header_name=settings.observability.correlation_header)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")
    app.include_router(persons_router, prefix="/api/v1")
    app.include_router(cases_router, prefix="/api/v1")
    app.include_router(creditors_router, prefix="/api/v1")
    app.include_router(deadlines_router, prefix="/api/v1")
    app.include_router(holidays_router, prefix="/api/v1")
    app.include_router(projects_router, prefix="/api/v1")
    app.include_router(calendar_router, prefix="/api/v1")
    app.include_router(activities_router, prefix="/api/v1")
    app.include_router(library_router, prefix="/api/v1")
    app.include_router(patrimony_router, prefix="/api/v1")
    app.include_router(recovery_router, prefix="/api/v1")
    app.include_router(drafting_router, prefix="/api/v1")
    app.include_router(team_router, prefix="/api/v1")
    app.include_router(financial_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "lexoffice.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
