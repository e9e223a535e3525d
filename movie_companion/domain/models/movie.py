from typing import List

from pydantic import BaseModel, Field


class Genre(BaseModel):
    id: int
    name: str


class CastMember(BaseModel):
    name: str
    character: str = ""
    profile_path: str = ""


class Movie(BaseModel):
    id: int
    title: str
    synopsis: str = ""
    release_date: str = ""
    poster_path: str = ""
    average_rating: float = 0.0


class MovieDetail(Movie):
    """Full movie record assembled from the catalog's details, credits and videos"""

    genres: List[Genre] = Field(default_factory=list)
    cast: List[CastMember] = Field(default_factory=list)
    director: str = ""
    writers: List[str] = Field(default_factory=list)
    trailer_key: str = ""

    @property
    def release_year(self) -> str:
        return self.release_date[:4]
