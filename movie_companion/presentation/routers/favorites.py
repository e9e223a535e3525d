from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from movie_companion.applications.interfaces.dtos.favorite import FavoriteList, FavoritePublic, FavoriteSchema
from movie_companion.applications.use_cases.favorite.add_favorite import AddFavoriteUseCase
from movie_companion.applications.use_cases.favorite.list_favorites import ListFavoritesUseCase
from movie_companion.applications.use_cases.favorite.remove_favorite import RemoveFavoriteUseCase
from movie_companion.domain.exceptions import DuplicateFavoriteError, NotFoundError
from movie_companion.domain.models.user import User
from movie_companion.domain.ports.repositories.favorite_repository import FavoriteRepository
from movie_companion.infrastructure.config.dependencies import get_current_user, get_favorite_repository

router = APIRouter(prefix="/favorites", tags=["favorites"])

FavoriteRepositoryDep = Annotated[FavoriteRepository, Depends(get_favorite_repository)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]


@router.get("/", response_model=FavoriteList)
async def list_favorites(current_user: CurrentUserDep, favorite_repository: FavoriteRepositoryDep):
    use_case = ListFavoritesUseCase(favorite_repository)
    return await use_case.execute(current_user.id)


@router.post("/", status_code=HTTPStatus.CREATED, response_model=FavoritePublic)
async def add_favorite(
    favorite: FavoriteSchema, current_user: CurrentUserDep, favorite_repository: FavoriteRepositoryDep
):
    try:
        use_case = AddFavoriteUseCase(favorite_repository)
        return await use_case.execute(current_user.id, favorite)
    except DuplicateFavoriteError as e:
        raise HTTPException(status_code=HTTPStatus.CONFLICT, detail=str(e))


@router.delete("/{movie_id}", status_code=HTTPStatus.NO_CONTENT)
async def remove_favorite(movie_id: int, current_user: CurrentUserDep, favorite_repository: FavoriteRepositoryDep):
    try:
        use_case = RemoveFavoriteUseCase(favorite_repository)
        await use_case.execute(current_user.id, movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
    return Response(status_code=HTTPStatus.NO_CONTENT)
