from movie_companion.applications.interfaces.dtos.movie import GenreList, GenrePublic
from movie_companion.domain.ports.services.catalog_client import CatalogClient


class ListGenresUseCase:
    def __init__(self, catalog_client: CatalogClient):
        self.catalog_client = catalog_client

    async def execute(self) -> GenreList:
        genres = await self.catalog_client.list_genres()
        return GenreList(genres=[GenrePublic.model_validate(genre) for genre in genres])
