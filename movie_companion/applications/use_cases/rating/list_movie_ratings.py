from movie_companion.applications.interfaces.dtos.rating import MovieRatingList, MovieRatingPublic
from movie_companion.domain.ports.repositories.rating_repository import RatingRepository


class ListMovieRatingsUseCase:
    def __init__(self, rating_repository: RatingRepository):
        self.rating_repository = rating_repository

    async def execute(self, movie_id: int) -> MovieRatingList:
        ratings = await self.rating_repository.list_for_movie(movie_id)
        return MovieRatingList(ratings=[MovieRatingPublic.model_validate(rating) for rating in ratings])
