import os

# Must be set before any backend module reads core.config
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("API_PREFIX", "")

from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from db.beer_repository import BeerRepository
from db.database import Base, get_async_session
from fakes import InMemoryBeerRepository
from main import app
from routers.beers import get_beer_service
from services.beer_service import BeerService


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    maker = async_sessionmaker(engine, expire_on_commit=False)
    async with maker() as session:
        yield session


@pytest.fixture
def repository(session: AsyncSession) -> BeerRepository:
    return BeerRepository(session)


@pytest.fixture
def service(repository: BeerRepository) -> BeerService:
    return BeerService(repository)


@pytest.fixture
def fake_repository() -> InMemoryBeerRepository:
    return InMemoryBeerRepository()


@pytest.fixture
def client(fake_repository: InMemoryBeerRepository):
    app.dependency_overrides[get_beer_service] = lambda: BeerService(fake_repository)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_client(session: AsyncSession) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Client whose requests run the real service and repository on the test database."""
    async def _session_override():
        yield session

    app.dependency_overrides[get_async_session] = _session_override
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
