"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, lexoffice.configs
System role: Database schema initialization

Usage:
    python -m lexoffice.boundary.db.create_tables
    python -m lexoffice.boundary.db.create_tables --drop
"""

import asyncio
import sys

from lexoffice.boundary.db.base import Base
from lexoffice.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
import lexoffice.boundary.db.models  # noqa: F401


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: CREATE TABLE is only issued for missing tables, so it is
    safe to run multiple times. Existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print(f"Created {len(Base.metadata.tables)} tables successfully.")


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    print("All tables dropped successfully.")


async def _main(argv: list[str]) -> None:
    if "--drop" in argv:
        await drop_all_tables()
    await create_all_tables()
    await get_async_engine().dispose()


if __name__ == "__main__":
    asyncio.run(_main(sys.argv[1:]))
