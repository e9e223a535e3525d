import random
from typing import List, Optional, Sequence

from movie_companion.domain.exceptions import (
    CatalogError,
    DetailFetchFailedError,
    InsufficientFavoritesError,
    MissingReleaseDateError,
    RepositoryError,
)
from movie_companion.domain.models.favorite import FavoriteEntry
from movie_companion.domain.models.movie import MovieDetail
from movie_companion.domain.models.quiz import QuizQuestion
from movie_companion.domain.ports.repositories.favorite_repository import FavoriteRepository
from movie_companion.domain.ports.repositories.quiz_history_repository import QuizHistoryRepository
from movie_companion.domain.ports.services.catalog_client import CatalogClient
from movie_companion.domain.ports.services.logger import LoggerPort
from movie_companion.domain.ports.services.quiz_service_port import QuizServicePort
from movie_companion.domain.services.question_strategies import (
    CastStrategy,
    DirectorStrategy,
    GenreStrategy,
    QuestionStrategy,
    ReleaseYearStrategy,
)


class QuizService(QuizServicePort):
    """Domain service that builds quiz questions from a user's favorite movies.

    Favorites are used in rotation: a movie is not asked again until every other
    favorite has had its turn, after which the rotation starts over.
    """

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        catalog_client: CatalogClient,
        history_repository: QuizHistoryRepository,
        logger: LoggerPort,
        rng: Optional[random.Random] = None,
        strategies: Optional[Sequence[QuestionStrategy]] = None,
    ):
        self.favorite_repository = favorite_repository
        self.catalog_client = catalog_client
        self.history_repository = history_repository
        self.logger = logger
        self.rng = rng or random.Random()
        self.fallback_strategy = ReleaseYearStrategy(self.rng)
        self.strategies = list(strategies) if strategies else self._default_strategies()

    def _default_strategies(self) -> List[QuestionStrategy]:
        return [
            self.fallback_strategy,
            DirectorStrategy(self.rng, self.catalog_client, self.logger),
            CastStrategy(self.rng, self.catalog_client, self.logger),
            GenreStrategy(self.rng),
        ]

    async def generate_question(self, user_id: int) -> QuizQuestion:
        favorites = await self._load_favorites(user_id)

        async with self.history_repository.lock(user_id):
            available = await self._rotation_pool(user_id, favorites)
            chosen = self.rng.choice(available)

            try:
                movie = await self.catalog_client.get_detail(chosen.movie_id)
            except CatalogError as e:
                self.logger.error(f"Could not fetch details of movie {chosen.movie_id} for quiz: {e}")
                raise DetailFetchFailedError(f"Failed to fetch details for movie {chosen.movie_id}") from e

            await self.history_repository.append(user_id, chosen.movie_id)

        return await self._ask(movie)

    async def _load_favorites(self, user_id: int) -> List[FavoriteEntry]:
        try:
            favorites = await self.favorite_repository.list_for_user(user_id)
        except RepositoryError as e:
            self.logger.error(f"Could not load favorites of user {user_id}: {e}")
            raise InsufficientFavoritesError("Not enough favorite movies to build a quiz") from e

        if not favorites:
            raise InsufficientFavoritesError("Not enough favorite movies to build a quiz")
        return favorites

    async def _rotation_pool(self, user_id: int, favorites: List[FavoriteEntry]) -> List[FavoriteEntry]:
        asked = set(await self.history_repository.get(user_id))
        available = [favorite for favorite in favorites if favorite.movie_id not in asked]
        if not available:
            self.logger.info(f"User {user_id} went through all {len(favorites)} favorites, restarting rotation")
            await self.history_repository.reset(user_id)
            available = favorites
        return available

    async def _ask(self, movie: MovieDetail) -> QuizQuestion:
        strategy = self.rng.choice(self.strategies)
        chain = [strategy] if strategy is self.fallback_strategy else [strategy, self.fallback_strategy]

        for candidate in chain:
            question = await candidate.generate(movie)
            if question is not None:
                self.logger.debug(f"Built {candidate.name} question for movie {movie.id}")
                return question
            self.logger.debug(f"{candidate.name} question not possible for movie {movie.id}, falling back")

        raise MissingReleaseDateError(f"Could not build any question for movie {movie.id}")
