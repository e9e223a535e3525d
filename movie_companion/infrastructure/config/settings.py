from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480
    CREATE_TABLES: bool = True
    SQL_ECHO: bool = False
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]


class CatalogSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="TMDB_", extra="ignore")

    api_key: str = ""
    base_url: str = "https://api.themoviedb.org/3"
    image_base_url: str = "https://image.tmdb.org/t/p/w500"
    language: str = "en-US"
    timeout: float = 10.0
    connect_timeout: float = 3.0
    # discover pages are 1-based; the catalog refuses anything past 500
    random_max_page: int = 50
