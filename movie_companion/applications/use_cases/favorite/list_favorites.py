from movie_companion.applications.interfaces.dtos.favorite import FavoriteList, FavoritePublic
from movie_companion.domain.ports.repositories.favorite_repository import FavoriteRepository


class ListFavoritesUseCase:
    def __init__(self, favorite_repository: FavoriteRepository):
        self.favorite_repository = favorite_repository

    async def execute(self, user_id: int) -> FavoriteList:
        favorites = await self.favorite_repository.list_for_user(user_id)
        return FavoriteList(favorites=[FavoritePublic.model_validate(favorite) for favorite in favorites])
