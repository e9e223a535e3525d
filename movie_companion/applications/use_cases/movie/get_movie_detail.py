from movie_companion.applications.interfaces.dtos.movie import MovieDetailPublic
from movie_companion.domain.exceptions import CatalogError, NotFoundError
from movie_companion.domain.ports.services.catalog_client import CatalogClient
from movie_companion.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class GetMovieDetailUseCase:
    def __init__(self, catalog_client: CatalogClient):
        self.catalog_client = catalog_client

    async def execute(self, movie_id: int) -> MovieDetailPublic:
        try:
            movie = await self.catalog_client.get_detail(movie_id)
        except CatalogError as e:
            logger.warning(f"Details for movie {movie_id} unavailable: {e}")
            raise NotFoundError(f"Movie with id {movie_id} not found") from e

        return MovieDetailPublic.model_validate(movie)
