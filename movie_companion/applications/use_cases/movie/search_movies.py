from movie_companion.applications.interfaces.dtos.movie import MovieList, MoviePublic
from movie_companion.domain.exceptions import ValidationError
from movie_companion.domain.ports.services.catalog_client import CatalogClient


class SearchMoviesUseCase:
    def __init__(self, catalog_client: CatalogClient):
        self.catalog_client = catalog_client

    async def execute(self, term: str) -> MovieList:
        term = term.strip()
        if not term:
            raise ValidationError("A search term is required")

        movies = await self.catalog_client.search(term)
        return MovieList(movies=[MoviePublic.model_validate(movie) for movie in movies])
