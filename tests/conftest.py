"""Shared fixtures: a throwaway SQLite store and an HTTP client bound to the app."""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from usermanager.database import get_db
from usermanager.main import app
from usermanager.models import Base


@pytest.fixture
async def engine(tmp_path):
    """Create an async engine on a fresh SQLite database with tables created."""
    db_path = tmp_path / "test_users.db"
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


def _override_db(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    return override_get_db


@pytest.fixture
async def client(session_factory):
    """HTTP client talking to the app, with get_db swapped for the test store."""
    app.dependency_overrides[get_db] = _override_db(session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def unreachable_client(tmp_path):
    """HTTP client whose store cannot be opened."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'users.db'}")
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    app.dependency_overrides[get_db] = _override_db(factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await engine.dispose()


@pytest.fixture
async def client_for(session_factory):
    """Factory: HTTP client for a given app instance, backed by the test store."""
    opened = []

    async def _open(application):
        application.dependency_overrides[get_db] = _override_db(session_factory)
        ac = AsyncClient(transport=ASGITransport(app=application), base_url="http://test")
        opened.append((application, ac))
        return ac

    yield _open
    for application, ac in opened:
        await ac.aclose()
        application.dependency_overrides.clear()
