from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class FavoriteEntry(BaseModel):
    user_id: int
    movie_id: int
    title: str
    poster_path: str = ""
    added_at: Optional[datetime] = None
