from typing import List

from pydantic import BaseModel

from movie_companion.applications.interfaces.dtos.movie import MoviePublic


class RecommendationResultResponse(BaseModel):
    """Response schema for recommendation results"""

    recommendations: List[MoviePublic]
