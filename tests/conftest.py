"""Pytest configuration and fixtures for the document filter.

Environment is pinned before any whitehall import so Settings never reads a
developer's .env values for Redis/telemetry. HTTP tests use
whitehall.main:create_app with dependency overrides; repository tests use
an in-memory SQLite database.
"""

import os

os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("SEARCH_API_URL", "http://search.test")
os.environ["DATABASE_URL"] = ""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from whitehall.core.config import SearchConfig
from whitehall.infrastructure.persistence.database import Base
import whitehall.infrastructure.persistence.models  # noqa: F401  (register tables)

from tests.fakes import FakeEditionRepository, FakeSearchGateway, FakeTaxonomyRepository


@pytest.fixture
def search_config() -> SearchConfig:
    """Search config with a fake endpoint and the default page size."""
    return SearchConfig(search_api_url="http://search.test", default_per_page=20)


@pytest.fixture
def edition_repo() -> FakeEditionRepository:
    return FakeEditionRepository()


@pytest.fixture
def taxonomy_repo() -> FakeTaxonomyRepository:
    return FakeTaxonomyRepository()


@pytest.fixture
def search_gateway() -> FakeSearchGateway:
    return FakeSearchGateway()


@pytest.fixture
async def app():
    """Fresh FastAPI app per test (dependency overrides do not leak)."""
    from whitehall.main import create_app

    return create_app()


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI, no lifespan)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session() -> AsyncSession:
    """In-memory SQLite session with all tables created. Discarded after the test."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()
