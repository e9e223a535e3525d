import random
from abc import ABC, abstractmethod
from typing import AbstractSet, Iterable, List, Optional, Sequence

from movie_companion.domain.exceptions import CatalogError, MissingReleaseDateError
from movie_companion.domain.models.movie import MovieDetail
from movie_companion.domain.models.quiz import NUM_OPTIONS, QuizOption, QuizQuestion
from movie_companion.domain.ports.services.catalog_client import CatalogClient
from movie_companion.domain.ports.services.logger import LoggerPort

NUM_DISTRACTORS = NUM_OPTIONS - 1

MIN_YEAR = 1900
MAX_YEAR = 2025
YEAR_SPREAD = 10

FALLBACK_DIRECTORS = (
    "Christopher Nolan",
    "Steven Spielberg",
    "Martin Scorsese",
    "Quentin Tarantino",
    "James Cameron",
    "Ridley Scott",
    "David Fincher",
    "Tim Burton",
    "Denis Villeneuve",
    "Jordan Peele",
    "Greta Gerwig",
    "Damien Chazelle",
)

FALLBACK_ACTORS = (
    "Leonardo DiCaprio",
    "Brad Pitt",
    "Tom Hanks",
    "Will Smith",
    "Robert Downey Jr.",
    "Scarlett Johansson",
    "Jennifer Lawrence",
    "Emma Stone",
    "Ryan Gosling",
    "Margot Robbie",
    "Timothée Chalamet",
    "Zendaya",
    "Chris Evans",
    "Gal Gadot",
    "Ryan Reynolds",
    "Sandra Bullock",
)

COMMON_GENRES = (
    "Action",
    "Comedy",
    "Drama",
    "Horror",
    "Romance",
    "Science Fiction",
    "Adventure",
    "Thriller",
    "Animation",
    "Documentary",
    "Fantasy",
    "Crime",
    "Mystery",
    "Family",
    "War",
    "History",
    "Music",
    "Western",
)


def build_question(prompt: str, correct: str, distractors: Sequence[str], rng: random.Random) -> QuizQuestion:
    """Shuffle the correct answer in with the distractors and number the options by position"""
    texts = [correct, *distractors[:NUM_DISTRACTORS]]
    rng.shuffle(texts)
    options = [QuizOption(id=position, text=text) for position, text in enumerate(texts, start=1)]
    return QuizQuestion(prompt=prompt, options=options, correct_option_id=texts.index(correct) + 1)


class QuestionStrategy(ABC):
    """One way of turning a movie into a question.

    ``generate`` returns None when the movie lacks what the strategy needs, so the
    caller can move on to the next strategy in its fallback chain.
    """

    name: str

    def __init__(self, rng: random.Random):
        self.rng = rng

    @abstractmethod
    async def generate(self, movie: MovieDetail) -> Optional[QuizQuestion]:
        pass


class ReleaseYearStrategy(QuestionStrategy):
    name = "release_year"

    async def generate(self, movie: MovieDetail) -> Optional[QuizQuestion]:
        if not movie.release_date:
            raise MissingReleaseDateError(f"Movie {movie.id} has no release date")
        try:
            correct_year = int(movie.release_year)
        except ValueError as e:
            raise MissingReleaseDateError(f"Movie {movie.id} has an unreadable release date") from e

        distractors = self.distractor_years(correct_year)
        return build_question(
            prompt=f"In what year was the movie '{movie.title}' released?",
            correct=str(correct_year),
            distractors=[str(year) for year in distractors],
            rng=self.rng,
        )

    def distractor_years(self, correct_year: int) -> List[int]:
        years: List[int] = []
        while len(years) < NUM_DISTRACTORS:
            candidate = correct_year + self.rng.randint(-YEAR_SPREAD, YEAR_SPREAD)
            if candidate < MIN_YEAR:
                candidate = self.rng.randint(MIN_YEAR, MIN_YEAR + 19)
            elif candidate > MAX_YEAR:
                candidate = self.rng.randint(MAX_YEAR - 20, MAX_YEAR - 1)

            if candidate != correct_year and candidate not in years:
                years.append(candidate)
        return years


class PopularPeopleStrategy(QuestionStrategy):
    """Base for questions whose distractors are other well known people"""

    department: str
    popularity_threshold: float
    max_candidates: int
    max_page: int
    fallback_names: Sequence[str]

    def __init__(self, rng: random.Random, catalog_client: CatalogClient, logger: LoggerPort):
        super().__init__(rng)
        self.catalog_client = catalog_client
        self.logger = logger

    async def _fetch_candidates(self, excluded: AbstractSet[str]) -> List[str]:
        page = self.rng.randint(1, self.max_page)
        try:
            people = await self.catalog_client.get_popular_people(page)
        except CatalogError as e:
            self.logger.warning(f"Popular people lookup failed for {self.name} question: {e}")
            return []

        names: List[str] = []
        for person in people:
            if len(names) >= self.max_candidates:
                break
            if not person.name or person.name in excluded or person.name in names:
                continue
            if person.department == self.department or person.popularity > self.popularity_threshold:
                names.append(person.name)
        return names

    async def distractor_names(self, correct_name: str, also_true: Iterable[str] = ()) -> List[str]:
        """Up to three names that are neither the answer nor any other true answer"""
        excluded = {correct_name, *also_true}
        names = await self._fetch_candidates(excluded)
        if len(names) < NUM_DISTRACTORS:
            self.logger.debug(f"Not enough popular people for {self.name} question, using fallback list")
            names = [name for name in self.fallback_names if name not in excluded]

        self.rng.shuffle(names)
        return names[:NUM_DISTRACTORS]


class DirectorStrategy(PopularPeopleStrategy):
    name = "director"
    department = "Directing"
    popularity_threshold = 10
    max_candidates = 10
    max_page = 5
    fallback_names = FALLBACK_DIRECTORS

    async def generate(self, movie: MovieDetail) -> Optional[QuizQuestion]:
        if not movie.director:
            return None

        distractors = await self.distractor_names(movie.director)
        if len(distractors) < NUM_DISTRACTORS:
            return None

        return build_question(
            prompt=f"Who directed the movie '{movie.title}'?",
            correct=movie.director,
            distractors=distractors,
            rng=self.rng,
        )


class CastStrategy(PopularPeopleStrategy):
    name = "cast"
    department = "Acting"
    popularity_threshold = 15
    max_candidates = 15
    max_page = 10
    fallback_names = FALLBACK_ACTORS

    async def generate(self, movie: MovieDetail) -> Optional[QuizQuestion]:
        leads = [member.name for member in movie.cast[:3] if member.name]
        if not leads:
            return None

        actor = self.rng.choice(leads)
        distractors = await self.distractor_names(actor, also_true=(member.name for member in movie.cast))
        if len(distractors) < NUM_DISTRACTORS:
            return None

        return build_question(
            prompt=f"Which of these actors appeared in the movie '{movie.title}'?",
            correct=actor,
            distractors=distractors,
            rng=self.rng,
        )


class GenreStrategy(QuestionStrategy):
    name = "genre"

    async def generate(self, movie: MovieDetail) -> Optional[QuizQuestion]:
        if not movie.genres:
            return None

        genre = self.rng.choice(movie.genres).name
        movie_genres = {item.name for item in movie.genres}
        pool = [name for name in COMMON_GENRES if name not in movie_genres]
        if len(pool) < NUM_DISTRACTORS:
            return None

        self.rng.shuffle(pool)
        return build_question(
            prompt=f"Which of these is a genre of the movie '{movie.title}'?",
            correct=genre,
            distractors=pool,
            rng=self.rng,
        )
