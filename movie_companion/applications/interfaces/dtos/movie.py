from typing import List

from pydantic import BaseModel, ConfigDict


class GenrePublic(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)


class CastMemberPublic(BaseModel):
    name: str
    character: str
    profile_path: str
    model_config = ConfigDict(from_attributes=True)


class MoviePublic(BaseModel):
    id: int
    title: str
    synopsis: str
    release_date: str
    poster_path: str
    average_rating: float
    model_config = ConfigDict(from_attributes=True)


class MovieList(BaseModel):
    movies: List[MoviePublic]


class MovieDetailPublic(MoviePublic):
    genres: List[GenrePublic]
    cast: List[CastMemberPublic]
    director: str
    writers: List[str]
    trailer_key: str


class GenreList(BaseModel):
    genres: List[GenrePublic]
