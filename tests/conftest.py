"""
Pytest fixtures for testing.

Provides:
- Async database session on in-memory SQLite
- Record store, counting store double and in-memory cache
- Parametrization service wired to the doubles
- Test client with database and cache overrides
"""

import asyncio
from collections import Counter
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from parametrization.main import app
from parametrization.models.base import Base
from parametrization.api.dependencies.database import get_db
from parametrization.core.container import get_cache
from parametrization.implementations.cache.memory import MemoryCacheBackend
from parametrization.repositories.parametrization import ParametrizationRepository
from parametrization.schemas.parametrization import ToggleRecord
from parametrization.services.parametrization import ParametrizationService


# Test database URL (SQLite in-memory for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Database session for one test."""
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db: AsyncSession, memory_cache: MemoryCacheBackend) -> AsyncGenerator[AsyncClient, None]:
    """
    Test client with database session and cache overrides.
    """

    async def override_get_db():
        yield db

    async def override_get_cache():
        return memory_cache

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = override_get_cache

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()


# ============ Store / Cache Doubles ============


class CountingStore:
    """Record store wrapper that counts calls per method."""

    def __init__(self, inner):
        self.inner = inner
        self.calls: Counter[str] = Counter()

    def __getattr__(self, name):
        attr = getattr(self.inner, name)
        if not callable(attr):
            return attr

        async def counted(*args, **kwargs):
            self.calls[name] += 1
            return await attr(*args, **kwargs)

        return counted


class GatedStore(CountingStore):
    """
    Store whose ``find_by_id`` reads the row, then waits for ``release``
    before returning it. Lets a test slip a write in between a cache miss
    and the cache fill.
    """

    def __init__(self, inner):
        super().__init__(inner)
        self.read_done = asyncio.Event()
        self.release = asyncio.Event()

    async def find_by_id(self, id: int):
        self.calls["find_by_id"] += 1
        record = await self.inner.find_by_id(id)
        self.read_done.set()
        await self.release.wait()
        return record


@pytest.fixture
def memory_cache() -> MemoryCacheBackend:
    return MemoryCacheBackend()


@pytest_asyncio.fixture
async def store(db: AsyncSession) -> ParametrizationRepository:
    return ParametrizationRepository(db)


@pytest_asyncio.fixture
async def counting_store(store: ParametrizationRepository) -> CountingStore:
    return CountingStore(store)


@pytest_asyncio.fixture
async def service(counting_store: CountingStore, memory_cache: MemoryCacheBackend) -> ParametrizationService:
    return ParametrizationService(counting_store, memory_cache)


# ============ Factory Fixtures ============


class ToggleFactory:
    """Factory for persisting test toggles directly in the store."""

    def __init__(self, store: ParametrizationRepository):
        self.store = store
        self._seq = 0

    async def create(
        self,
        key: str | None = None,
        description: str = "Test toggle",
        enabled: bool = False,
    ) -> ToggleRecord:
        self._seq += 1
        key = key or f"TOGGLE_{self._seq}"
        return await self.store.save(
            ToggleRecord(key=key, description=description, enabled=enabled)
        )


@pytest_asyncio.fixture
async def toggle_factory(store: ParametrizationRepository) -> ToggleFactory:
    return ToggleFactory(store)
