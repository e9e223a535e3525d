from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from movie_companion.applications.interfaces.dtos.movie import GenreList, MovieDetailPublic, MovieList, MoviePublic
from movie_companion.applications.use_cases.movie.discover_movies_by_genre import DiscoverMoviesByGenreUseCase
from movie_companion.applications.use_cases.movie.get_movie_detail import GetMovieDetailUseCase
from movie_companion.applications.use_cases.movie.get_random_movie import GetRandomMovieUseCase
from movie_companion.applications.use_cases.movie.list_genres import ListGenresUseCase
from movie_companion.applications.use_cases.movie.search_movies import SearchMoviesUseCase
from movie_companion.domain.exceptions import CatalogError, NotFoundError, ValidationError
from movie_companion.domain.ports.services.catalog_client import CatalogClient
from movie_companion.infrastructure.config.dependencies import get_catalog_client
from movie_companion.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])

CatalogClientDep = Annotated[CatalogClient, Depends(get_catalog_client)]


def _catalog_unavailable(e: CatalogError) -> HTTPException:
    logger.warning(f"Catalog request failed: {e}")
    return HTTPException(status_code=HTTPStatus.BAD_GATEWAY, detail="Movie catalog is unavailable")


@router.get("/search", response_model=MovieList)
async def search_movies(catalog_client: CatalogClientDep, term: str = Query("")):
    try:
        use_case = SearchMoviesUseCase(catalog_client)
        return await use_case.execute(term)
    except ValidationError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))
    except CatalogError as e:
        raise _catalog_unavailable(e)


@router.get("/genres", response_model=GenreList)
async def list_genres(catalog_client: CatalogClientDep):
    try:
        use_case = ListGenresUseCase(catalog_client)
        return await use_case.execute()
    except CatalogError as e:
        raise _catalog_unavailable(e)


@router.get("/genre", response_model=MovieList)
async def discover_by_genre(catalog_client: CatalogClientDep, genre_id: int = Query(..., gt=0)):
    try:
        use_case = DiscoverMoviesByGenreUseCase(catalog_client)
        return await use_case.execute(genre_id)
    except CatalogError as e:
        raise _catalog_unavailable(e)


@router.get("/random", response_model=MoviePublic)
async def random_movie(
    catalog_client: CatalogClientDep,
    genre_id: Optional[int] = Query(None, gt=0),
    year: Optional[int] = Query(None, ge=1874),
):
    try:
        use_case = GetRandomMovieUseCase(catalog_client)
        return await use_case.execute(genre_id=genre_id, year=year)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
    except CatalogError as e:
        raise _catalog_unavailable(e)


@router.get("/{movie_id}", response_model=MovieDetailPublic)
async def get_movie(movie_id: int, catalog_client: CatalogClientDep):
    try:
        use_case = GetMovieDetailUseCase(catalog_client)
        return await use_case.execute(movie_id)
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
