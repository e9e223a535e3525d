from typing import Optional

from movie_companion.applications.interfaces.dtos.movie import MoviePublic
from movie_companion.domain.ports.services.catalog_client import CatalogClient


class GetRandomMovieUseCase:
    def __init__(self, catalog_client: CatalogClient):
        self.catalog_client = catalog_client

    async def execute(self, genre_id: Optional[int] = None, year: Optional[int] = None) -> MoviePublic:
        movie = await self.catalog_client.random_movie(genre_id=genre_id, year=year)
        return MoviePublic.model_validate(movie)
