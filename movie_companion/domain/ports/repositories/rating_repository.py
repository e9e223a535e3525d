from abc import ABC, abstractmethod
from typing import List

from movie_companion.domain.models.rating import MovieRating, Rating


class RatingRepository(ABC):
    @abstractmethod
    async def upsert(self, rating: Rating) -> Rating:
        """Store the rating, replacing any previous rating by the same user for the same movie"""
        pass

    @abstractmethod
    async def list_for_movie(self, movie_id: int) -> List[MovieRating]:
        pass
