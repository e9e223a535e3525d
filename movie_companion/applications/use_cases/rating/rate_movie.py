from movie_companion.applications.interfaces.dtos.rating import RatingPublic, RatingSchema
from movie_companion.domain.models.rating import Rating
from movie_companion.domain.ports.repositories.rating_repository import RatingRepository


class RateMovieUseCase:
    def __init__(self, rating_repository: RatingRepository):
        self.rating_repository = rating_repository

    async def execute(self, user_id: int, movie_id: int, rating_data: RatingSchema) -> RatingPublic:
        rating = await self.rating_repository.upsert(
            Rating(user_id=user_id, movie_id=movie_id, score=rating_data.score, comment=rating_data.comment)
        )
        return RatingPublic.model_validate(rating)
