import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("TMDB_API_KEY", "test-api-key")

import random  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from movie_companion.app import app  # noqa: E402
from movie_companion.domain.ports.repositories.favorite_repository import FavoriteRepository  # noqa: E402
from movie_companion.domain.ports.repositories.rating_repository import RatingRepository  # noqa: E402
from movie_companion.domain.ports.repositories.user_repository import UserRepository  # noqa: E402
from movie_companion.domain.ports.services.auth_service import AuthService  # noqa: E402
from movie_companion.domain.ports.services.catalog_client import CatalogClient  # noqa: E402
from movie_companion.domain.ports.services.logger import LoggerPort  # noqa: E402
from movie_companion.infrastructure.adapters.repositories.in_memory_quiz_history_repository import (  # noqa: E402
    InMemoryQuizHistoryRepository,
)
from movie_companion.infrastructure.config.dependencies import (  # noqa: E402
    get_catalog_client,
    get_quiz_history_repository,
)
from movie_companion.infrastructure.persistence.database import get_session  # noqa: E402
from movie_companion.infrastructure.persistence.models import table_registry  # noqa: E402


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """In-memory database shared by every connection of the test"""
        engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, sqlite_engine):
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest.fixture
    def catalog_client(self):
        """Catalog stand-in so no request leaves the test process"""
        return AsyncMock(spec=CatalogClient)

    @pytest.fixture
    def history_repository(self):
        return InMemoryQuizHistoryRepository()

    @pytest_asyncio.fixture
    async def client(self, test_session, catalog_client, history_repository):
        """Create test HTTP client with database and catalog overrides"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session
        app.dependency_overrides[get_catalog_client] = lambda: catalog_client
        app.dependency_overrides[get_quiz_history_repository] = lambda: history_repository

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()

    @pytest_asyncio.fixture
    async def auth_headers(self, client):
        """Register a user and return bearer headers for it"""
        await client.post(
            "/users/", json={"name": "Test User", "email": "test@example.com", "password": "testpassword123"}
        )
        response = await client.post(
            "/auth/token", data={"username": "test@example.com", "password": "testpassword123"}
        )
        return {"Authorization": f"Bearer {response.json()['access_token']}"}


# Shared fixtures for use case and service testing
@pytest.fixture
def mock_user_repository():
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_favorite_repository():
    return AsyncMock(spec=FavoriteRepository)


@pytest.fixture
def mock_rating_repository():
    return AsyncMock(spec=RatingRepository)


@pytest.fixture
def mock_catalog_client():
    return AsyncMock(spec=CatalogClient)


@pytest.fixture
def mock_auth_service():
    return MagicMock(spec=AuthService)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)


@pytest.fixture
def rng():
    """Seeded generator so shuffles and picks are reproducible"""
    return random.Random(1234)
