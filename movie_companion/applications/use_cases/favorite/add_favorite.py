from movie_companion.applications.interfaces.dtos.favorite import FavoritePublic, FavoriteSchema
from movie_companion.domain.exceptions import DuplicateFavoriteError
from movie_companion.domain.models.favorite import FavoriteEntry
from movie_companion.domain.ports.repositories.favorite_repository import FavoriteRepository
from movie_companion.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class AddFavoriteUseCase:
    def __init__(self, favorite_repository: FavoriteRepository):
        self.favorite_repository = favorite_repository

    async def execute(self, user_id: int, favorite_data: FavoriteSchema) -> FavoritePublic:
        if await self.favorite_repository.exists(user_id, favorite_data.movie_id):
            raise DuplicateFavoriteError("This movie is already in the favorites list")

        favorite = await self.favorite_repository.add(
            FavoriteEntry(
                user_id=user_id,
                movie_id=favorite_data.movie_id,
                title=favorite_data.title,
                poster_path=favorite_data.poster_path,
            )
        )
        logger.info(f"User {user_id} added movie {favorite.movie_id} to favorites")
        return FavoritePublic.model_validate(favorite)
