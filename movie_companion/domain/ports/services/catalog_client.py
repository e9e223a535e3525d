from abc import ABC, abstractmethod
from typing import List, Optional

from movie_companion.domain.models.movie import Genre, Movie, MovieDetail
from movie_companion.domain.models.person import Person


class CatalogClient(ABC):
    """Port for the external movie catalog. Every method raises CatalogError on failure."""

    @abstractmethod
    async def search(self, term: str) -> List[Movie]:
        pass

    @abstractmethod
    async def get_detail(self, movie_id: int) -> MovieDetail:
        pass

    @abstractmethod
    async def get_popular_people(self, page: int = 1) -> List[Person]:
        pass

    @abstractmethod
    async def discover_by_genre(self, genre_id: int) -> List[Movie]:
        """Movies of the genre, most popular first"""
        pass

    @abstractmethod
    async def list_genres(self) -> List[Genre]:
        pass

    @abstractmethod
    async def random_movie(self, genre_id: Optional[int] = None, year: Optional[int] = None) -> Movie:
        pass
