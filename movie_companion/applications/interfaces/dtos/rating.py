from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RatingSchema(BaseModel):
    score: int = Field(ge=1, le=5)
    comment: str = ""


class RatingPublic(BaseModel):
    movie_id: int
    user_id: int
    score: int
    comment: str
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class MovieRatingPublic(BaseModel):
    id: int
    score: int
    comment: str
    created_at: datetime
    user_name: str
    model_config = ConfigDict(from_attributes=True)


class MovieRatingList(BaseModel):
    ratings: List[MovieRatingPublic]
