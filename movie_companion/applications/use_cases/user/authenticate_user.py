from movie_companion.applications.interfaces.dtos.user import Token
from movie_companion.domain.exceptions import InvalidCredentialsError
from movie_companion.domain.ports.repositories.user_repository import UserRepository
from movie_companion.domain.ports.services.auth_service import AuthService


class AuthenticateUserUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def execute(self, email: str, password: str) -> Token:
        user = await self.user_repository.get_by_email(email)

        # same error for unknown email and wrong password
        if not user or not self.auth_service.verify_password(password, user.password_hash):
            raise InvalidCredentialsError("Incorrect email or password")

        return Token(access_token=self.auth_service.create_access_token(user), token_type="bearer")
