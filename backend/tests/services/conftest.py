"""Service test fixtures: async DB, registry wiring and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - registry_provider.registry points at a SqlSkuStore over the test DB
    - Registry clock ticks one second per call so ordering is deterministic
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from sku_registry.db.base import Base
import sku_registry.models  # noqa: F401
from sku_registry.infrastructure.database import get_db, DatabaseSessionManager
from sku_registry.infrastructure.sql_sku_store import SqlSkuStore
from sku_registry.services.sku_registry import SkuRegistry
import sku_registry.infrastructure.database as db_module
import sku_registry.services.registry_provider as registry_module
from sku_registry.main import app


class TickClock:
    """Deterministic clock: each call is one second after the previous."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now = self.now + timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock():
    return TickClock()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine (no pool args)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def sql_registry(test_manager, clock):
    return SkuRegistry(SqlSkuStore(test_manager), clock=clock)


@pytest.fixture
async def client(test_manager, test_session_factory, sql_registry):
    """FastAPI test client with DB and registry wired to the test engine."""
    async def override_get_db():
        async with test_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    original_registry = registry_module.registry
    db_module.db_manager = test_manager
    registry_module.registry = sql_registry

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
    registry_module.registry = original_registry


async def _login(client, email: str, password: str = "s3cret-pass") -> dict:
    await client.post(
        "/api/v1/auth/register", json={"email": email, "password": password},
    )
    res = await client.post(
        "/api/v1/auth/login", json={"email": email, "password": password},
    )
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
async def auth_headers(client):
    """Register + login a user; returns Authorization headers."""
    return await _login(client, "jeweler@example.com")


@pytest.fixture
def login(client):
    """Factory for additional logged-in identities."""
    async def _make(email: str, password: str = "s3cret-pass") -> dict:
        return await _login(client, email, password)
    return _make
