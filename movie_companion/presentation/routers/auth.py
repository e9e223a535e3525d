from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.security import OAuth2PasswordRequestForm

from movie_companion.applications.interfaces.dtos.user import Token
from movie_companion.applications.use_cases.user.authenticate_user import AuthenticateUserUseCase
from movie_companion.domain.exceptions import InvalidCredentialsError
from movie_companion.domain.ports.repositories.user_repository import UserRepository
from movie_companion.domain.ports.services.auth_service import AuthService
from movie_companion.infrastructure.config.dependencies import get_auth_service, get_user_repository

router = APIRouter(prefix="/auth", tags=["auth"])

OAuth2Form = Annotated[OAuth2PasswordRequestForm, Depends()]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/token", response_model=Token)
async def login_for_access_token(
    form_data: OAuth2Form, user_repository: UserRepositoryDep, auth_service: AuthServiceDep
):
    try:
        use_case = AuthenticateUserUseCase(user_repository, auth_service)
        return await use_case.execute(form_data.username, form_data.password)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
