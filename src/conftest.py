import contextlib

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import src.gifts.repository.orm_models  # noqa: F401  registers the gifts table
import src.guests.repository.orm_models  # noqa: F401  registers the guests and rsvps tables
from src.main import app
from src.models.base import BaseModel


@pytest.fixture
def client_factory():
    """Build test clients with the given dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None, raise_app_exceptions: bool = True):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest_asyncio.fixture
async def client(client_factory):
    """Create a test client without overrides."""
    async with client_factory() as ac:
        yield ac


@pytest_asyncio.fixture
async def db_session(tmp_path) -> AsyncSession:
    """A session on a throwaway SQLite database with every table created."""
    test_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}")
    async with test_engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    async with async_sessionmaker(test_engine, expire_on_commit=False)() as session:
        yield session

    await test_engine.dispose()
