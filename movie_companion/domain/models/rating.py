from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Rating(BaseModel):
    user_id: int
    movie_id: int
    score: int = Field(ge=1, le=5)
    comment: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None


class MovieRating(BaseModel):
    """A rating as shown on a movie page, carrying the author's name"""

    id: int
    score: int
    comment: str
    created_at: datetime
    user_name: str
