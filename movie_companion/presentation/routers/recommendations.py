from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from movie_companion.applications.interfaces.dtos.movie import MoviePublic
from movie_companion.applications.interfaces.dtos.recommendation import RecommendationResultResponse
from movie_companion.domain.exceptions import CatalogError
from movie_companion.domain.models.user import User
from movie_companion.domain.ports.services.recommendation_service_port import RecommendationServicePort
from movie_companion.infrastructure.config.dependencies import get_current_user, get_recommendation_service
from movie_companion.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])

CurrentUserDep = Annotated[User, Depends(get_current_user)]


@router.get("/", response_model=RecommendationResultResponse)
async def get_recommendations(
    current_user: CurrentUserDep,
    recommendation_service: Annotated[RecommendationServicePort, Depends(get_recommendation_service)],
):
    """Popular movies from the genre the user favorites most"""
    try:
        movies = await recommendation_service.recommend(current_user.id)
        return RecommendationResultResponse(recommendations=[MoviePublic.model_validate(movie) for movie in movies])
    except CatalogError as e:
        logger.warning(f"Catalog failed while recommending for user {current_user.id}: {e}")
        raise HTTPException(status_code=HTTPStatus.BAD_GATEWAY, detail="Movie catalog is unavailable")
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error generating recommendations")
        raise HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail="Internal server error")
