from abc import ABC, abstractmethod
from typing import List

from movie_companion.domain.models.movie import Movie


class RecommendationServicePort(ABC):
    """Port for genre based recommendations"""

    @abstractmethod
    async def recommend(self, user_id: int) -> List[Movie]:
        """Popular movies of the user's dominant genre that are not already favorites"""
        pass
