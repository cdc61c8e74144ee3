"""
Test fixtures for Journey backend tests.
"""
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import journey.models  # noqa: F401
from journey.core.database import Base
from journey.core.redis_lifecycle import get_cache
from journey.dependencies.store import get_dispatcher, get_gateway
from journey.main import app
from journey.services.notifications.dispatcher import NotificationDispatcher
from tests.fakes import FakeCache, InMemoryGateway, RecordingNotifier


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def gateway():
    return InMemoryGateway()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def dispatcher(notifier):
    return NotificationDispatcher(notifier)


@pytest.fixture
def cache():
    return FakeCache()


@pytest.fixture(scope="function")
async def db_session():
    """
    Fresh in-memory SQLite database per test.
    Creates all tables before the test and drops them after.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign key constraints for SQLite
    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)
    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
async def client(gateway, dispatcher, cache):
    """
    Async test client with the store, the mailer and the cache overridden.
    """
    async def _override_get_cache():
        yield cache

    app.dependency_overrides[get_gateway] = lambda: gateway
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    app.dependency_overrides[get_cache] = _override_get_cache

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await dispatcher.drain()
    app.dependency_overrides.clear()
