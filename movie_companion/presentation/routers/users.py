from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from movie_companion.applications.interfaces.dtos.user import UserPublic, UserSchema
from movie_companion.applications.use_cases.user.register_user import RegisterUserUseCase
from movie_companion.domain.exceptions import EmailAlreadyExistsError
from movie_companion.domain.models.user import User
from movie_companion.domain.ports.repositories.user_repository import UserRepository
from movie_companion.domain.ports.services.auth_service import AuthService
from movie_companion.infrastructure.config.dependencies import get_auth_service, get_current_user, get_user_repository

router = APIRouter(prefix="/users", tags=["users"])

UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]


@router.post("/", status_code=HTTPStatus.CREATED, response_model=UserPublic)
async def create_user(user: UserSchema, user_repository: UserRepositoryDep, auth_service: AuthServiceDep):
    try:
        use_case = RegisterUserUseCase(user_repository, auth_service)
        return await use_case.execute(user)
    except EmailAlreadyExistsError as e:
        raise HTTPException(status_code=HTTPStatus.CONFLICT, detail=str(e))


@router.get("/me", response_model=UserPublic)
async def read_current_user(current_user: CurrentUserDep):
    return UserPublic.model_validate(current_user)
