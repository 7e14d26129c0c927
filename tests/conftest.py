"""
Shared test fixtures and configuration for entire test suite.

Provides: fast pipeline settings, render engine and object store fakes,
in-memory SQLite async database
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid

import pytest

from fakes import FakeEngineFactory, FakeObjectStore
from quote_pdf.configs import PipelineSettings, RenderSettings


@pytest.fixture
def render_settings() -> RenderSettings:
    """Render settings with short deadlines."""
    return RenderSettings(
        engine_startup_timeout=0.5,
        engine_shutdown_timeout=0.5,
        context_timeout=0.2,
        asset_timeout=0.05,
    )


@pytest.fixture
def pipeline_settings(render_settings: RenderSettings) -> PipelineSettings:
    """Pipeline settings with short deadlines and no retry wait."""
    return PipelineSettings(
        fetch_timeout=0.5,
        settle_timeout=0.3,
        paginate_timeout=0.5,
        upload_timeout=0.5,
        request_slack=0.5,
        max_retries=1,
        retry_wait=0,
        diagnostics_dir=None,
        render=render_settings,
    )


@pytest.fixture
def engine_factory() -> FakeEngineFactory:
    return FakeEngineFactory()


@pytest.fixture
def object_store() -> FakeObjectStore:
    return FakeObjectStore()


@pytest.fixture
def quote_id() -> uuid.UUID:
    """Generate a test quote ID."""
    return uuid.uuid4()


@pytest.fixture
async def session_factory():
    """
    In-memory SQLite async database with all quote tables.

    Yields:
        async_sessionmaker: Factory bound to the test database
    """
    from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from quote_pdf.boundary.db.base import Base
    import quote_pdf.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
