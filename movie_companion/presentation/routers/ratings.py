from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from movie_companion.applications.interfaces.dtos.rating import MovieRatingList, RatingPublic, RatingSchema
from movie_companion.applications.use_cases.rating.list_movie_ratings import ListMovieRatingsUseCase
from movie_companion.applications.use_cases.rating.rate_movie import RateMovieUseCase
from movie_companion.domain.models.user import User
from movie_companion.domain.ports.repositories.rating_repository import RatingRepository
from movie_companion.infrastructure.config.dependencies import get_current_user, get_rating_repository

router = APIRouter(prefix="/movies/{movie_id}/ratings", tags=["ratings"])

RatingRepositoryDep = Annotated[RatingRepository, Depends(get_rating_repository)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]


@router.get("", response_model=MovieRatingList)
async def list_movie_ratings(movie_id: int, rating_repository: RatingRepositoryDep):
    use_case = ListMovieRatingsUseCase(rating_repository)
    return await use_case.execute(movie_id)


@router.post("", status_code=HTTPStatus.CREATED, response_model=RatingPublic)
async def rate_movie(
    movie_id: int, payload: RatingSchema, current_user: CurrentUserDep, rating_repository: RatingRepositoryDep
):
    use_case = RateMovieUseCase(rating_repository)
    return await use_case.execute(current_user.id, movie_id, payload)
