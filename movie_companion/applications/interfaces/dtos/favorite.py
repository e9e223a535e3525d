from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FavoriteSchema(BaseModel):
    movie_id: int = Field(gt=0)
    title: str = Field(min_length=1)
    poster_path: str = ""


class FavoritePublic(BaseModel):
    movie_id: int
    title: str
    poster_path: str
    added_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class FavoriteList(BaseModel):
    favorites: List[FavoritePublic]
