"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite sessions, API client, service mocks
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

import uuid
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Foreign keys are enforced so ON DELETE actions behave like PostgreSQL.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from lexoffice.boundary.db import models  # noqa: F401 - registers tables
    from lexoffice.boundary.db.base import Base
    from lexoffice.boundary.db.connection import enable_sqlite_foreign_keys

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def client():
    """
    Create a TestClient over a fresh application.

    The lifespan is not entered, so no model client is created.
    """
    from fastapi.testclient import TestClient

    from lexoffice.api.main import create_app

    test_client = TestClient(create_app())
    yield test_client
    test_client.app.dependency_overrides.clear()


@pytest.fixture
def mock_writer():
    """
    Create mock LegalWriterAgent for testing.

    Returns:
        AsyncMock: Writer whose ainvoke returns a canned analysis
    """
    from lexoffice.core.agentic_system.agent import GenerationResult, GenerationUsage
    from lexoffice.core.enums import ModelTier

    writer = AsyncMock()
    writer.ainvoke = AsyncMock(
        return_value=GenerationResult(
            text="Analysis text",
            model="gemini-test-pro",
            tier=ModelTier.PREMIUM,
            usage=GenerationUsage(tokens_in=120, tokens_out=80, duration_ms=15),
        )
    )
    return writer


@pytest.fixture
def record_id():
    """Generate a test record ID."""
    return uuid.uuid4()
