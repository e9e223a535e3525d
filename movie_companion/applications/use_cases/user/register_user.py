from movie_companion.applications.interfaces.dtos.user import UserPublic, UserSchema
from movie_companion.domain.exceptions import EmailAlreadyExistsError
from movie_companion.domain.models.user import User
from movie_companion.domain.ports.repositories.user_repository import UserRepository
from movie_companion.domain.ports.services.auth_service import AuthService
from movie_companion.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class RegisterUserUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def execute(self, user_data: UserSchema) -> UserPublic:
        logger.info(f"Registering user: {user_data.email}")

        existing_user = await self.user_repository.get_by_email(user_data.email)
        if existing_user:
            raise EmailAlreadyExistsError("Email already registered")

        user = User(
            name=user_data.name,
            email=user_data.email,
            password_hash=self.auth_service.hash_password(user_data.password),
        )

        created_user = await self.user_repository.create(user)

        if created_user.id is None:
            raise RuntimeError("User creation failed - no ID assigned")

        logger.info(f"User registered successfully: {created_user.email}")

        return UserPublic(id=created_user.id, name=created_user.name, email=created_user.email)
