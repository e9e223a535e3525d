import asyncio
from collections import Counter
from typing import List, Optional

from movie_companion.domain.exceptions import CatalogError
from movie_companion.domain.models.favorite import FavoriteEntry
from movie_companion.domain.models.movie import Movie, MovieDetail
from movie_companion.domain.ports.repositories.favorite_repository import FavoriteRepository
from movie_companion.domain.ports.services.catalog_client import CatalogClient
from movie_companion.domain.ports.services.logger import LoggerPort
from movie_companion.domain.ports.services.recommendation_service_port import RecommendationServicePort

MAX_CONCURRENT_DETAILS = 8


class RecommendationService(RecommendationServicePort):
    """Domain service recommending popular movies from the user's most favorited genre"""

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        catalog_client: CatalogClient,
        logger: LoggerPort,
        max_concurrent_details: int = MAX_CONCURRENT_DETAILS,
    ):
        self.favorite_repository = favorite_repository
        self.catalog_client = catalog_client
        self.logger = logger
        self.max_concurrent_details = max_concurrent_details

    async def recommend(self, user_id: int) -> List[Movie]:
        favorites = await self.favorite_repository.list_for_user(user_id)
        if not favorites:
            self.logger.info(f"User {user_id} has no favorites, nothing to recommend")
            return []

        details = await self._fetch_details(favorites)
        genre_id = self.dominant_genre(details)
        if genre_id is None:
            self.logger.info(f"No genre information for favorites of user {user_id}")
            return []

        self.logger.info(f"Recommending genre {genre_id} to user {user_id}")
        candidates = await self.catalog_client.discover_by_genre(genre_id)

        favorite_ids = {favorite.movie_id for favorite in favorites}
        return [movie for movie in candidates if movie.id not in favorite_ids]

    async def _fetch_details(self, favorites: List[FavoriteEntry]) -> List[MovieDetail]:
        semaphore = asyncio.Semaphore(self.max_concurrent_details)

        async def fetch(movie_id: int) -> MovieDetail:
            async with semaphore:
                return await self.catalog_client.get_detail(movie_id)

        results = await asyncio.gather(
            *(fetch(favorite.movie_id) for favorite in favorites),
            return_exceptions=True,
        )

        details = []
        for favorite, result in zip(favorites, results):
            if isinstance(result, CatalogError):
                self.logger.warning(f"Skipping movie {favorite.movie_id} in genre tally: {result}")
                continue
            if isinstance(result, BaseException):
                raise result
            details.append(result)
        return details

    @staticmethod
    def dominant_genre(details: List[MovieDetail]) -> Optional[int]:
        """Most frequent genre id; ties go to the genre seen first"""
        tally: Counter = Counter()
        for detail in details:
            for genre_id in dict.fromkeys(genre.id for genre in detail.genres):
                tally[genre_id] += 1

        if not tally:
            return None
        # max keeps the first maximal key, and Counter iterates in insertion order
        return max(tally, key=tally.__getitem__)
