from abc import ABC, abstractmethod
from typing import List

from movie_companion.domain.models.favorite import FavoriteEntry


class FavoriteRepository(ABC):
    @abstractmethod
    async def add(self, favorite: FavoriteEntry) -> FavoriteEntry:
        pass

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[FavoriteEntry]:
        pass

    @abstractmethod
    async def exists(self, user_id: int, movie_id: int) -> bool:
        pass

    @abstractmethod
    async def delete(self, user_id: int, movie_id: int) -> bool:
        pass
