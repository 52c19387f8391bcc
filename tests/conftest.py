"""
Lambda Hubs API — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the whole suite. Sample ORM rows for
       mocked services live in tests/factories.py.

Fixture Hierarchy:
    Route tests (no database):
    ├── mock_hub_service / mock_adopter_service: AsyncMock services
    ├── hubs_client / shelter_client: HTTPX AsyncClient over ASGITransport
    │
    Service & end-to-end tests (in-memory SQLite):
    ├── sqlite_engine: fresh database with all tables created
    ├── hub_service / adopter_service: real services on that database
    └── hubs_e2e_client / shelter_e2e_client: apps wired to the real services
"""

import os

# Must happen before hubs_api.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hubs_api.config import Settings
from hubs_api.database import build_engine, build_session_factory, create_tables
from hubs_api.main import create_hubs_app, create_shelter_app
from hubs_api.services.adopter_service import AdopterService
from hubs_api.services.hub_service import HubService


# ══════════════════════════════════════════════════════════════════════════
# Route-level fixtures (services mocked)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_hub_service():
    """
    AsyncMock shaped like HubService.

    Usage:
        mock_hub_service.find_by_id.return_value = make_hub(3)
        mock_hub_service.find.side_effect = DatabaseError()
    """
    return AsyncMock(spec=HubService)


@pytest.fixture
def mock_adopter_service():
    return AsyncMock(spec=AdopterService)


@pytest_asyncio.fixture
async def hubs_client(mock_hub_service) -> AsyncGenerator[AsyncClient, None]:
    app = create_hubs_app(hub_service=mock_hub_service)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def shelter_client(mock_adopter_service) -> AsyncGenerator[AsyncClient, None]:
    app = create_shelter_app(adopter_service=mock_adopter_service)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Database-backed fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sqlite_settings() -> Settings:
    return Settings(database_url="sqlite+aiosqlite:///:memory:", log_level="WARNING")


@pytest_asyncio.fixture
async def sqlite_engine(sqlite_settings):
    """A fresh in-memory database per test, schema created from the models."""
    engine = build_engine(sqlite_settings)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def hub_service(sqlite_engine) -> HubService:
    return HubService(build_session_factory(sqlite_engine))


@pytest.fixture
def adopter_service(sqlite_engine) -> AdopterService:
    return AdopterService(build_session_factory(sqlite_engine))


@pytest_asyncio.fixture
async def hubs_e2e_client(hub_service, sqlite_engine) -> AsyncGenerator[AsyncClient, None]:
    app = create_hubs_app(hub_service=hub_service)
    app.state.engine = sqlite_engine
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def shelter_e2e_client(adopter_service) -> AsyncGenerator[AsyncClient, None]:
    app = create_shelter_app(adopter_service=adopter_service)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
