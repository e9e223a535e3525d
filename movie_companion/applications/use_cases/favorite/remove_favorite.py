from movie_companion.domain.exceptions import NotFoundError
from movie_companion.domain.ports.repositories.favorite_repository import FavoriteRepository


class RemoveFavoriteUseCase:
    def __init__(self, favorite_repository: FavoriteRepository):
        self.favorite_repository = favorite_repository

    async def execute(self, user_id: int, movie_id: int) -> None:
        removed = await self.favorite_repository.delete(user_id, movie_id)
        if not removed:
            raise NotFoundError(f"Movie {movie_id} is not in the favorites list")
