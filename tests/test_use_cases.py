import pytest

from movie_companion.applications.interfaces.dtos.favorite import FavoritePublic, FavoriteSchema
from movie_companion.applications.interfaces.dtos.rating import RatingSchema
from movie_companion.applications.interfaces.dtos.user import Token, UserPublic, UserSchema
from movie_companion.applications.use_cases.favorite.add_favorite import AddFavoriteUseCase
from movie_companion.applications.use_cases.favorite.list_favorites import ListFavoritesUseCase
from movie_companion.applications.use_cases.favorite.remove_favorite import RemoveFavoriteUseCase
from movie_companion.applications.use_cases.movie.get_movie_detail import GetMovieDetailUseCase
from movie_companion.applications.use_cases.movie.search_movies import SearchMoviesUseCase
from movie_companion.applications.use_cases.rating.rate_movie import RateMovieUseCase
from movie_companion.applications.use_cases.user.authenticate_user import AuthenticateUserUseCase
from movie_companion.applications.use_cases.user.register_user import RegisterUserUseCase
from movie_companion.domain.exceptions import (
    CatalogError,
    DuplicateFavoriteError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from movie_companion.domain.models.rating import Rating

from .factories import favorite_factory, movie_factory, user_factory


class TestRegisterUserUseCase:
    @pytest.fixture
    def user_schema(self):
        return UserSchema(**user_factory.create_user_data())

    @pytest.fixture
    def register_user_use_case(self, mock_user_repository, mock_auth_service):
        mock_auth_service.hash_password.return_value = "hashed_password"
        return RegisterUserUseCase(mock_user_repository, mock_auth_service)

    @pytest.mark.asyncio
    async def test_register_user_success(self, register_user_use_case, mock_user_repository, user_schema):
        mock_user_repository.get_by_email.return_value = None
        mock_user_repository.create.return_value = user_factory.create_domain_user(id=1)

        result = await register_user_use_case.execute(user_schema)

        assert isinstance(result, UserPublic)
        assert result.id == 1
        stored = mock_user_repository.create.await_args.args[0]
        assert stored.password_hash == "hashed_password"

    @pytest.mark.asyncio
    async def test_register_existing_email(self, register_user_use_case, mock_user_repository, user_schema):
        mock_user_repository.get_by_email.return_value = user_factory.create_domain_user(id=1)

        with pytest.raises(EmailAlreadyExistsError):
            await register_user_use_case.execute(user_schema)

        mock_user_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_repository_failure(self, register_user_use_case, mock_user_repository, user_schema):
        mock_user_repository.get_by_email.return_value = None
        mock_user_repository.create.return_value = user_factory.create_domain_user(id=None)

        with pytest.raises(RuntimeError, match="User creation failed - no ID assigned"):
            await register_user_use_case.execute(user_schema)


class TestAuthenticateUserUseCase:
    @pytest.fixture
    def use_case(self, mock_user_repository, mock_auth_service):
        return AuthenticateUserUseCase(mock_user_repository, mock_auth_service)

    @pytest.mark.asyncio
    async def test_valid_credentials_return_token(self, use_case, mock_user_repository, mock_auth_service):
        mock_user_repository.get_by_email.return_value = user_factory.create_domain_user(id=1)
        mock_auth_service.verify_password.return_value = True
        mock_auth_service.create_access_token.return_value = "token"

        result = await use_case.execute("test@example.com", "testpassword123")

        assert result == Token(access_token="token", token_type="bearer")

    @pytest.mark.asyncio
    async def test_unknown_email(self, use_case, mock_user_repository):
        mock_user_repository.get_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await use_case.execute("nobody@example.com", "whatever")

    @pytest.mark.asyncio
    async def test_wrong_password(self, use_case, mock_user_repository, mock_auth_service):
        mock_user_repository.get_by_email.return_value = user_factory.create_domain_user(id=1)
        mock_auth_service.verify_password.return_value = False

        with pytest.raises(InvalidCredentialsError):
            await use_case.execute("test@example.com", "wrong")


class TestFavoriteUseCases:
    @pytest.mark.asyncio
    async def test_add_favorite(self, mock_favorite_repository):
        mock_favorite_repository.exists.return_value = False
        mock_favorite_repository.add.return_value = favorite_factory.create_favorite(movie_id=603, title="The Matrix")

        result = await AddFavoriteUseCase(mock_favorite_repository).execute(
            1, FavoriteSchema(movie_id=603, title="The Matrix")
        )

        assert isinstance(result, FavoritePublic)
        assert result.movie_id == 603

    @pytest.mark.asyncio
    async def test_add_duplicate_favorite(self, mock_favorite_repository):
        mock_favorite_repository.exists.return_value = True

        with pytest.raises(DuplicateFavoriteError):
            await AddFavoriteUseCase(mock_favorite_repository).execute(1, FavoriteSchema(movie_id=603, title="X"))

        mock_favorite_repository.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_favorites(self, mock_favorite_repository):
        mock_favorite_repository.list_for_user.return_value = favorite_factory.create_favorites([1, 2])

        result = await ListFavoritesUseCase(mock_favorite_repository).execute(1)

        assert [favorite.movie_id for favorite in result.favorites] == [1, 2]

    @pytest.mark.asyncio
    async def test_remove_missing_favorite(self, mock_favorite_repository):
        mock_favorite_repository.delete.return_value = False

        with pytest.raises(NotFoundError):
            await RemoveFavoriteUseCase(mock_favorite_repository).execute(1, 603)


class TestRateMovieUseCase:
    @pytest.mark.asyncio
    async def test_rate_movie_upserts(self, mock_rating_repository):
        mock_rating_repository.upsert.side_effect = lambda rating: rating.model_copy(update={"id": 7})

        result = await RateMovieUseCase(mock_rating_repository).execute(1, 603, RatingSchema(score=4, comment="Nice"))

        assert result.score == 4
        assert result.movie_id == 603
        stored = mock_rating_repository.upsert.await_args.args[0]
        assert stored == Rating(user_id=1, movie_id=603, score=4, comment="Nice")

    def test_score_out_of_range_is_rejected(self):
        with pytest.raises(ValueError):
            RatingSchema(score=6)


class TestMovieUseCases:
    @pytest.mark.asyncio
    async def test_search_trims_term(self, mock_catalog_client):
        mock_catalog_client.search.return_value = [movie_factory.create_movie(id=603, title="The Matrix")]

        result = await SearchMoviesUseCase(mock_catalog_client).execute("  matrix ")

        mock_catalog_client.search.assert_awaited_once_with("matrix")
        assert result.movies[0].title == "The Matrix"

    @pytest.mark.asyncio
    async def test_search_blank_term(self, mock_catalog_client):
        with pytest.raises(ValidationError):
            await SearchMoviesUseCase(mock_catalog_client).execute("   ")

    @pytest.mark.asyncio
    async def test_movie_detail_not_found(self, mock_catalog_client):
        mock_catalog_client.get_detail.side_effect = CatalogError("404")

        with pytest.raises(NotFoundError):
            await GetMovieDetailUseCase(mock_catalog_client).execute(999)
