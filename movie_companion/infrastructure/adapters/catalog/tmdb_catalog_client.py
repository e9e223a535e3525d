import asyncio
import random
from typing import Any, Callable, Dict, List, Optional, TypeVar

import httpx

from movie_companion.domain.exceptions import CatalogError, ConfigurationError, NotFoundError
from movie_companion.domain.models.movie import CastMember, Genre, Movie, MovieDetail
from movie_companion.domain.models.person import Person
from movie_companion.domain.ports.services.catalog_client import CatalogClient
from movie_companion.domain.ports.services.logger import LoggerPort
from movie_companion.infrastructure.config.settings import CatalogSettings

MAX_CAST = 10
WRITER_JOBS = {"Screenplay", "Writer", "Story"}

T = TypeVar("T")


class TMDBCatalogClient(CatalogClient):
    """CatalogClient adapter for The Movie Database (TMDB) v3 API"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: CatalogSettings,
        logger: LoggerPort,
        rng: Optional[random.Random] = None,
    ):
        self.http_client = http_client
        self.settings = settings
        self.logger = logger
        self.rng = rng or random.Random()

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        if not self.settings.api_key:
            raise ConfigurationError("TMDB API key is not configured")

        query = {"api_key": self.settings.api_key, "language": self.settings.language, **(params or {})}
        url = f"{self.settings.base_url.rstrip('/')}{path}"
        try:
            response = await self.http_client.get(url, params=query)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            self.logger.warning(f"TMDB answered {e.response.status_code} for {path}")
            raise CatalogError(f"Catalog returned status {e.response.status_code} for {path}") from e
        except httpx.RequestError as e:
            self.logger.error(f"Error requesting {path} from TMDB: {e}")
            raise CatalogError(f"Could not reach the catalog for {path}") from e
        except ValueError as e:
            raise CatalogError(f"Catalog sent an unreadable response for {path}") from e

    def _parse(self, path: str, build: Callable[[], T]) -> T:
        # pydantic's ValidationError is a ValueError
        try:
            return build()
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            self.logger.warning(f"Unexpected TMDB payload for {path}: {e}")
            raise CatalogError(f"Catalog sent an unexpected payload for {path}") from e

    def _image_url(self, path: Optional[str]) -> str:
        return f"{self.settings.image_base_url}{path}" if path else ""

    def _to_movie(self, data: Dict[str, Any]) -> Movie:
        return Movie(
            id=data["id"],
            title=data.get("title") or "",
            synopsis=data.get("overview") or "",
            release_date=data.get("release_date") or "",
            poster_path=self._image_url(data.get("poster_path")),
            average_rating=float(data.get("vote_average") or 0.0),
        )

    def _to_movies(self, data: Dict[str, Any]) -> List[Movie]:
        return [self._to_movie(item) for item in data.get("results") or [] if "id" in item]

    def _to_genres(self, items: List[Dict[str, Any]]) -> List[Genre]:
        return [Genre(id=item["id"], name=item.get("name") or "") for item in items if "id" in item]

    def _to_detail(self, basic: Dict[str, Any], credits: Dict[str, Any], videos: Dict[str, Any]) -> MovieDetail:
        crew = credits.get("crew") or []
        director = next((member.get("name") or "" for member in crew if member.get("job") == "Director"), "")
        writers = list(
            dict.fromkeys(
                member["name"] for member in crew if member.get("job") in WRITER_JOBS and member.get("name")
            )
        )
        trailer_key = next(
            (
                video.get("key") or ""
                for video in videos.get("results") or []
                if video.get("site") == "YouTube" and video.get("type") == "Trailer"
            ),
            "",
        )

        return MovieDetail(
            **self._to_movie(basic).model_dump(),
            genres=self._to_genres(basic.get("genres") or []),
            cast=[
                CastMember(
                    name=member.get("name") or "",
                    character=member.get("character") or "",
                    profile_path=self._image_url(member.get("profile_path")),
                )
                for member in (credits.get("cast") or [])[:MAX_CAST]
            ],
            director=director,
            writers=writers,
            trailer_key=trailer_key,
        )

    async def search(self, term: str) -> List[Movie]:
        self.logger.info(f"Searching TMDB for '{term}'")
        data = await self._get_json("/search/movie", {"query": term})
        return self._parse("/search/movie", lambda: self._to_movies(data))

    async def get_detail(self, movie_id: int) -> MovieDetail:
        basic, credits, videos = await asyncio.gather(
            self._get_json(f"/movie/{movie_id}"),
            self._get_json(f"/movie/{movie_id}/credits"),
            self._get_json(f"/movie/{movie_id}/videos"),
        )
        return self._parse(f"/movie/{movie_id}", lambda: self._to_detail(basic, credits, videos))

    async def get_popular_people(self, page: int = 1) -> List[Person]:
        data = await self._get_json("/person/popular", {"page": page})
        return self._parse(
            "/person/popular",
            lambda: [
                Person(
                    id=item["id"],
                    name=item.get("name") or "",
                    department=item.get("known_for_department") or "",
                    popularity=float(item.get("popularity") or 0.0),
                )
                for item in data.get("results") or []
            ],
        )

    async def discover_by_genre(self, genre_id: int) -> List[Movie]:
        data = await self._get_json("/discover/movie", {"with_genres": genre_id, "sort_by": "popularity.desc"})
        return self._parse("/discover/movie", lambda: self._to_movies(data))

    async def list_genres(self) -> List[Genre]:
        data = await self._get_json("/genre/movie/list")
        return self._parse("/genre/movie/list", lambda: self._to_genres(data.get("genres") or []))

    async def random_movie(self, genre_id: Optional[int] = None, year: Optional[int] = None) -> Movie:
        params: Dict[str, Any] = {"sort_by": "popularity.desc"}
        if genre_id is not None:
            params["with_genres"] = genre_id
        if year is not None:
            params["primary_release_year"] = year

        page = self.rng.randint(1, self.settings.random_max_page)
        data = await self._get_json("/discover/movie", {**params, "page": page})
        movies = self._parse("/discover/movie", lambda: self._to_movies(data))

        # narrow filters can have fewer pages than the random pick
        total_pages = self._parse("/discover/movie", lambda: int(data.get("total_pages") or 0))
        if not movies and 0 < total_pages < page:
            retry = await self._get_json("/discover/movie", {**params, "page": self.rng.randint(1, total_pages)})
            movies = self._parse("/discover/movie", lambda: self._to_movies(retry))

        if not movies:
            raise NotFoundError("No movie found for the given filters")
        return self.rng.choice(movies)
