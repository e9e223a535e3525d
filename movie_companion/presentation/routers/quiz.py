from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from movie_companion.applications.interfaces.dtos.quiz import QuizQuestionResponse
from movie_companion.domain.exceptions import CatalogError, InsufficientFavoritesError, MissingReleaseDateError
from movie_companion.domain.models.user import User
from movie_companion.domain.ports.services.quiz_service_port import QuizServicePort
from movie_companion.infrastructure.config.dependencies import get_current_user, get_quiz_service
from movie_companion.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/quiz", tags=["quiz"])

CurrentUserDep = Annotated[User, Depends(get_current_user)]


@router.get("/question", response_model=QuizQuestionResponse)
async def get_quiz_question(
    current_user: CurrentUserDep,
    quiz_service: Annotated[QuizServicePort, Depends(get_quiz_service)],
):
    """Multiple choice question about one of the user's favorite movies"""
    try:
        question = await quiz_service.generate_question(current_user.id)
        return QuizQuestionResponse.model_validate(question)
    except InsufficientFavoritesError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
    except MissingReleaseDateError as e:
        logger.warning(f"No question possible for user {current_user.id}: {e}")
        raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=str(e))
    except CatalogError as e:
        logger.warning(f"Catalog failed while building quiz for user {current_user.id}: {e}")
        raise HTTPException(status_code=HTTPStatus.BAD_GATEWAY, detail=str(e))
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error generating quiz question")
        raise HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail="Internal server error")
