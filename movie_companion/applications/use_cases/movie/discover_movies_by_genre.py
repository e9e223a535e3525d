from movie_companion.applications.interfaces.dtos.movie import MovieList, MoviePublic
from movie_companion.domain.ports.services.catalog_client import CatalogClient


class DiscoverMoviesByGenreUseCase:
    def __init__(self, catalog_client: CatalogClient):
        self.catalog_client = catalog_client

    async def execute(self, genre_id: int) -> MovieList:
        movies = await self.catalog_client.discover_by_genre(genre_id)
        return MovieList(movies=[MoviePublic.model_validate(movie) for movie in movies])
