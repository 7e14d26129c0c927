"""
Database table creation script.

Creates the quote tables defined in the ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, quote_pdf.configs
System role: Database schema initialization

Usage:
    python -m quote_pdf.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from quote_pdf.boundary.db.base import Base
from quote_pdf.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
import quote_pdf.boundary.db.models  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all quote tables from registered ORM models.

    Idempotent: CREATE TABLE IF NOT EXISTS per model, existing tables
    remain unchanged.

    Args:
        engine: Async engine (defaults to one built from the settings)

    Raises:
        SQLAlchemyError: If the connection or table creation fails
    """
    owned = engine is None
    engine = engine or get_async_engine()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("%s:create_all_tables - tables created", __name__)
    finally:
        if owned:
            await engine.dispose()


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all quote tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Async engine (defaults to one built from the settings)
    """
    owned = engine is None
    engine = engine or get_async_engine()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("%s:drop_all_tables - tables dropped", __name__)
    finally:
        if owned:
            await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_all_tables())
