import random

import pytest

from movie_companion.domain.exceptions import CatalogError, MissingReleaseDateError
from movie_companion.domain.services.question_strategies import (
    COMMON_GENRES,
    FALLBACK_ACTORS,
    FALLBACK_DIRECTORS,
    MAX_YEAR,
    MIN_YEAR,
    CastStrategy,
    DirectorStrategy,
    GenreStrategy,
    ReleaseYearStrategy,
    build_question,
)

from .factories import movie_factory


def option_texts(question):
    return [option.text for option in question.options]


def distractors(question):
    return [option.text for option in question.options if option.id != question.correct_option_id]


class TestBuildQuestion:
    def test_options_are_numbered_by_position(self, rng):
        question = build_question("Q?", "right", ["a", "b", "c"], rng)

        assert [option.id for option in question.options] == [1, 2, 3, 4]
        assert sorted(option_texts(question)) == ["a", "b", "c", "right"]
        assert question.correct_answer == "right"

    def test_extra_distractors_are_ignored(self, rng):
        question = build_question("Q?", "right", ["a", "b", "c", "d", "e"], rng)

        assert len(question.options) == 4
        assert "d" not in option_texts(question)
        assert "e" not in option_texts(question)

    def test_correct_position_varies_with_shuffle(self):
        positions = {
            build_question("Q?", "right", ["a", "b", "c"], random.Random(seed)).correct_option_id
            for seed in range(50)
        }

        assert len(positions) > 1


class TestReleaseYearStrategy:
    @pytest.mark.asyncio
    async def test_correct_answer_is_release_year(self, rng):
        movie = movie_factory.create_movie_detail(title="Inception", release_date="2010-07-16")

        question = await ReleaseYearStrategy(rng).generate(movie)

        assert question.prompt == "In what year was the movie 'Inception' released?"
        assert question.correct_answer == "2010"
        assert len(set(option_texts(question))) == 4

    @pytest.mark.asyncio
    async def test_full_iso_date_uses_year_part(self, rng):
        movie = movie_factory.create_movie_detail(release_date="1999-03-31")

        question = await ReleaseYearStrategy(rng).generate(movie)

        assert question.correct_answer == "1999"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("release_date", ["", "n/a"])
    async def test_missing_or_unreadable_date_raises(self, rng, release_date):
        movie = movie_factory.create_movie_detail(release_date=release_date)

        with pytest.raises(MissingReleaseDateError):
            await ReleaseYearStrategy(rng).generate(movie)

    @pytest.mark.parametrize("correct_year", [1895, 1905, 1960, 2020, 2025])
    def test_distractor_years_are_unique_and_in_range(self, correct_year):
        for seed in range(30):
            years = ReleaseYearStrategy(random.Random(seed)).distractor_years(correct_year)

            assert len(years) == 3
            assert len(set(years)) == 3
            assert correct_year not in years
            assert all(MIN_YEAR <= year <= MAX_YEAR for year in years)

    def test_distractor_years_stay_close_to_correct_year(self, rng):
        years = ReleaseYearStrategy(rng).distractor_years(1980)

        assert all(abs(year - 1980) <= 10 for year in years)


class TestDirectorStrategy:
    @pytest.fixture
    def strategy(self, rng, mock_catalog_client, mock_logger):
        return DirectorStrategy(rng, mock_catalog_client, mock_logger)

    @pytest.mark.asyncio
    async def test_distractors_come_from_popular_directors(self, strategy, mock_catalog_client):
        names = ["Sofia Coppola", "Bong Joon-ho", "Ava DuVernay", "Hayao Miyazaki"]
        mock_catalog_client.get_popular_people.return_value = movie_factory.create_people(
            names, department="Directing", popularity=5.0
        )
        movie = movie_factory.create_movie_detail(title="Inception", director="Christopher Nolan")

        question = await strategy.generate(movie)

        assert question.prompt == "Who directed the movie 'Inception'?"
        assert question.correct_answer == "Christopher Nolan"
        assert set(distractors(question)) <= set(names)
        page = mock_catalog_client.get_popular_people.await_args.args[0]
        assert 1 <= page <= 5

    @pytest.mark.asyncio
    async def test_no_director_is_not_applicable(self, strategy, mock_catalog_client):
        movie = movie_factory.create_movie_detail(director="")

        assert await strategy.generate(movie) is None
        mock_catalog_client.get_popular_people.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_catalog_failure_uses_fallback_list(self, strategy, mock_catalog_client, mock_logger):
        mock_catalog_client.get_popular_people.side_effect = CatalogError("timeout")
        movie = movie_factory.create_movie_detail(director="Christopher Nolan")

        question = await strategy.generate(movie)

        assert question.correct_answer == "Christopher Nolan"
        assert set(distractors(question)) <= set(FALLBACK_DIRECTORS)
        assert "Christopher Nolan" not in distractors(question)
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_too_few_candidates_uses_fallback_list(self, strategy, mock_catalog_client):
        mock_catalog_client.get_popular_people.return_value = movie_factory.create_people(
            ["Sofia Coppola", "Bong Joon-ho"], department="Directing"
        )
        movie = movie_factory.create_movie_detail(director="Unknown Director")

        question = await strategy.generate(movie)

        assert set(distractors(question)) <= set(FALLBACK_DIRECTORS)

    @pytest.mark.asyncio
    async def test_candidates_filter_department_popularity_and_correct_name(self, strategy, mock_catalog_client):
        people = (
            movie_factory.create_people(["Christopher Nolan", "Sofia Coppola"], department="Directing", popularity=1.0)
            + movie_factory.create_people(["Obscure Actor"], department="Acting", popularity=3.0)
            + movie_factory.create_people(["Famous Actor"], department="Acting", popularity=50.0)
            + movie_factory.create_people(["Sofia Coppola"], department="Directing", popularity=1.0)
        )
        mock_catalog_client.get_popular_people.return_value = people

        names = await strategy._fetch_candidates({"Christopher Nolan"})

        assert names == ["Sofia Coppola", "Famous Actor"]

    @pytest.mark.asyncio
    async def test_candidates_are_capped(self, strategy, mock_catalog_client):
        mock_catalog_client.get_popular_people.return_value = movie_factory.create_people(
            [f"Director {index}" for index in range(30)], department="Directing"
        )

        names = await strategy._fetch_candidates({"Christopher Nolan"})

        assert len(names) == 10


class TestCastStrategy:
    @pytest.fixture
    def strategy(self, rng, mock_catalog_client, mock_logger):
        return CastStrategy(rng, mock_catalog_client, mock_logger)

    @pytest.mark.asyncio
    async def test_correct_answer_is_one_of_the_leads(self, strategy, mock_catalog_client):
        mock_catalog_client.get_popular_people.return_value = movie_factory.create_people(
            ["Actor A", "Actor B", "Actor C", "Actor D"], department="Acting"
        )
        cast = ["Lead 1", "Lead 2", "Lead 3", "Support 4", "Support 5"]
        movie = movie_factory.create_movie_detail(title="Inception", cast=cast)

        question = await strategy.generate(movie)

        assert question.prompt == "Which of these actors appeared in the movie 'Inception'?"
        assert question.correct_answer in cast[:3]
        assert set(distractors(question)) <= {"Actor A", "Actor B", "Actor C", "Actor D"}
        page = mock_catalog_client.get_popular_people.await_args.args[0]
        assert 1 <= page <= 10

    @pytest.mark.asyncio
    async def test_empty_cast_is_not_applicable(self, strategy):
        movie = movie_factory.create_movie_detail(cast=[])

        assert await strategy.generate(movie) is None

    @pytest.mark.asyncio
    async def test_catalog_failure_uses_fallback_list(self, strategy, mock_catalog_client):
        mock_catalog_client.get_popular_people.side_effect = CatalogError("boom")
        movie = movie_factory.create_movie_detail(cast=["Tom Hanks"])

        question = await strategy.generate(movie)

        assert question.correct_answer == "Tom Hanks"
        assert set(distractors(question)) <= set(FALLBACK_ACTORS) - {"Tom Hanks"}

    @pytest.mark.asyncio
    async def test_other_cast_members_are_never_distractors(self, strategy, mock_catalog_client):
        cast = ["Lead 1", "Lead 2", "Lead 3", "Support 4", "Support 5"]
        mock_catalog_client.get_popular_people.return_value = movie_factory.create_people(
            ["Lead 2", "Support 5", "Actor A", "Actor B", "Lead 1", "Actor C"], department="Acting"
        )
        movie = movie_factory.create_movie_detail(cast=cast)

        question = await strategy.generate(movie)

        assert sorted(distractors(question)) == ["Actor A", "Actor B", "Actor C"]

    @pytest.mark.asyncio
    async def test_fallback_list_skips_cast_members(self, strategy, mock_catalog_client):
        mock_catalog_client.get_popular_people.side_effect = CatalogError("boom")
        movie = movie_factory.create_movie_detail(cast=["Tom Hanks", "Zendaya", "Brad Pitt", "Emma Stone"])

        question = await strategy.generate(movie)

        assert not set(distractors(question)) & {"Tom Hanks", "Zendaya", "Brad Pitt", "Emma Stone"}


class TestGenreStrategy:
    @pytest.mark.asyncio
    async def test_correct_answer_is_a_movie_genre(self, rng):
        movie = movie_factory.create_movie_detail(title="Inception", genres=[(28, "Action"), (878, "Science Fiction")])

        question = await GenreStrategy(rng).generate(movie)

        assert question.prompt == "Which of these is a genre of the movie 'Inception'?"
        assert question.correct_answer in {"Action", "Science Fiction"}
        assert set(distractors(question)) <= set(COMMON_GENRES)
        assert question.correct_answer not in distractors(question)

    @pytest.mark.asyncio
    async def test_no_genres_is_not_applicable(self, rng):
        movie = movie_factory.create_movie_detail(genres=[])

        assert await GenreStrategy(rng).generate(movie) is None

    @pytest.mark.asyncio
    async def test_uncommon_genre_still_gets_three_distractors(self, rng):
        movie = movie_factory.create_movie_detail(genres=[(10770, "TV Movie")])

        question = await GenreStrategy(rng).generate(movie)

        assert question.correct_answer == "TV Movie"
        assert len(distractors(question)) == 3

    @pytest.mark.asyncio
    async def test_multi_genre_movie_has_exactly_one_true_option(self):
        genres = [(28, "Action"), (18, "Drama"), (53, "Thriller")]
        movie = movie_factory.create_movie_detail(genres=genres)

        for seed in range(200):
            question = await GenreStrategy(random.Random(seed)).generate(movie)

            true_options = [text for text in option_texts(question) if text in {"Action", "Drama", "Thriller"}]
            assert true_options == [question.correct_answer]
