from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_companion.domain.exceptions import RepositoryError
from movie_companion.domain.models.rating import MovieRating, Rating as DomainRating
from movie_companion.domain.ports.repositories.rating_repository import RatingRepository
from movie_companion.infrastructure.persistence.models import Rating as SQLRating
from movie_companion.infrastructure.persistence.models import User as SQLUser


class SQLAlchemyRatingRepository(RatingRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_rating: SQLRating) -> DomainRating:
        return DomainRating(
            id=sql_rating.id,
            user_id=sql_rating.user_id,
            movie_id=sql_rating.movie_id,
            score=sql_rating.score,
            comment=sql_rating.comment or "",
            created_at=sql_rating.created_at,
        )

    async def upsert(self, rating: DomainRating) -> DomainRating:
        sql_rating = await self.session.scalar(
            select(SQLRating).where(SQLRating.user_id == rating.user_id, SQLRating.movie_id == rating.movie_id)
        )
        try:
            if sql_rating:
                sql_rating.score = rating.score
                sql_rating.comment = rating.comment
            else:
                sql_rating = SQLRating(
                    user_id=rating.user_id, movie_id=rating.movie_id, score=rating.score, comment=rating.comment
                )
                self.session.add(sql_rating)
            await self.session.commit()
            await self.session.refresh(sql_rating)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"Could not save rating of movie {rating.movie_id}") from e
        return self._to_domain(sql_rating)

    async def list_for_movie(self, movie_id: int) -> List[MovieRating]:
        query = (
            select(SQLRating, SQLUser.name)
            .join(SQLUser, SQLRating.user_id == SQLUser.id)
            .where(SQLRating.movie_id == movie_id)
            .order_by(SQLRating.created_at.desc(), SQLRating.id.desc())
        )
        result = await self.session.execute(query)
        return [
            MovieRating(
                id=row.id,
                score=row.score,
                comment=row.comment or "",
                created_at=row.created_at,
                user_name=user_name,
            )
            for row, user_name in result.all()
        ]
