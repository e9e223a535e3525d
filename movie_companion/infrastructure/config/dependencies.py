from functools import lru_cache
from http import HTTPStatus
from typing import Annotated

import httpx
from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from movie_companion.domain.models.user import User
from movie_companion.domain.ports.repositories.favorite_repository import FavoriteRepository
from movie_companion.domain.ports.repositories.quiz_history_repository import QuizHistoryRepository
from movie_companion.domain.ports.repositories.rating_repository import RatingRepository
from movie_companion.domain.ports.repositories.user_repository import UserRepository
from movie_companion.domain.ports.services.auth_service import AuthService
from movie_companion.domain.ports.services.catalog_client import CatalogClient
from movie_companion.domain.ports.services.quiz_service_port import QuizServicePort
from movie_companion.domain.ports.services.recommendation_service_port import RecommendationServicePort
from movie_companion.domain.services.quiz_service import QuizService
from movie_companion.domain.services.recommendation_service import RecommendationService
from movie_companion.infrastructure.adapters.catalog.http_client import get_http_client
from movie_companion.infrastructure.adapters.catalog.tmdb_catalog_client import TMDBCatalogClient
from movie_companion.infrastructure.adapters.repositories.in_memory_quiz_history_repository import (
    InMemoryQuizHistoryRepository,
)
from movie_companion.infrastructure.adapters.repositories.sqlalchemy_favorite_repository import (
    SQLAlchemyFavoriteRepository,
)
from movie_companion.infrastructure.adapters.repositories.sqlalchemy_rating_repository import (
    SQLAlchemyRatingRepository,
)
from movie_companion.infrastructure.adapters.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)
from movie_companion.infrastructure.adapters.services.jwt_auth_service import JWTAuthService
from movie_companion.infrastructure.config.settings import CatalogSettings, Settings
from movie_companion.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movie_companion.infrastructure.persistence.database import get_session

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def get_settings() -> Settings:
    return Settings()


def get_catalog_settings() -> CatalogSettings:
    return CatalogSettings()


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    return SQLAlchemyUserRepository(session)


def get_favorite_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> FavoriteRepository:
    return SQLAlchemyFavoriteRepository(session)


def get_rating_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> RatingRepository:
    return SQLAlchemyRatingRepository(session)


@lru_cache
def get_quiz_history_repository() -> QuizHistoryRepository:
    """Process wide history store, shared by every request"""
    return InMemoryQuizHistoryRepository()


def get_catalog_client(
    http_client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    catalog_settings: Annotated[CatalogSettings, Depends(get_catalog_settings)],
) -> CatalogClient:
    return TMDBCatalogClient(http_client, catalog_settings, StdLoggerAdapter(__name__, component="catalog"))


def get_auth_service(
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return JWTAuthService(user_repository, settings)


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    user = await auth_service.get_current_user(token)
    if user is None:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_quiz_service(
    favorite_repository: Annotated[FavoriteRepository, Depends(get_favorite_repository)],
    catalog_client: Annotated[CatalogClient, Depends(get_catalog_client)],
    history_repository: Annotated[QuizHistoryRepository, Depends(get_quiz_history_repository)],
) -> QuizServicePort:
    return QuizService(
        favorite_repository=favorite_repository,
        catalog_client=catalog_client,
        history_repository=history_repository,
        logger=StdLoggerAdapter(__name__, component="quiz"),
    )


def get_recommendation_service(
    favorite_repository: Annotated[FavoriteRepository, Depends(get_favorite_repository)],
    catalog_client: Annotated[CatalogClient, Depends(get_catalog_client)],
) -> RecommendationServicePort:
    return RecommendationService(
        favorite_repository=favorite_repository,
        catalog_client=catalog_client,
        logger=StdLoggerAdapter(__name__, component="recommendations"),
    )
