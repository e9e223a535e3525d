from typing import List

from sqlalchemy import delete, exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_companion.domain.exceptions import DuplicateFavoriteError, RepositoryError
from movie_companion.domain.models.favorite import FavoriteEntry
from movie_companion.domain.ports.repositories.favorite_repository import FavoriteRepository
from movie_companion.infrastructure.persistence.models import Favorite as SQLFavorite


class SQLAlchemyFavoriteRepository(FavoriteRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_favorite: SQLFavorite) -> FavoriteEntry:
        return FavoriteEntry(
            user_id=sql_favorite.user_id,
            movie_id=sql_favorite.movie_id,
            title=sql_favorite.title,
            poster_path=sql_favorite.poster_path or "",
            added_at=sql_favorite.added_at,
        )

    async def add(self, favorite: FavoriteEntry) -> FavoriteEntry:
        sql_favorite = SQLFavorite(
            user_id=favorite.user_id,
            movie_id=favorite.movie_id,
            title=favorite.title,
            poster_path=favorite.poster_path,
        )
        try:
            self.session.add(sql_favorite)
            await self.session.commit()
            await self.session.refresh(sql_favorite)
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateFavoriteError("This movie is already in the favorites list") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"Could not save favorite {favorite.movie_id} for user {favorite.user_id}") from e
        return self._to_domain(sql_favorite)

    async def list_for_user(self, user_id: int) -> List[FavoriteEntry]:
        try:
            rows = await self.session.scalars(
                select(SQLFavorite).where(SQLFavorite.user_id == user_id).order_by(SQLFavorite.id)
            )
        except SQLAlchemyError as e:
            raise RepositoryError(f"Could not list favorites for user {user_id}") from e
        return [self._to_domain(row) for row in rows.all()]

    async def exists(self, user_id: int, movie_id: int) -> bool:
        query = select(
            exists().where(SQLFavorite.user_id == user_id, SQLFavorite.movie_id == movie_id)
        )
        return bool(await self.session.scalar(query))

    async def delete(self, user_id: int, movie_id: int) -> bool:
        result = await self.session.execute(
            delete(SQLFavorite).where(SQLFavorite.user_id == user_id, SQLFavorite.movie_id == movie_id)
        )
        await self.session.commit()
        return (result.rowcount or 0) > 0
