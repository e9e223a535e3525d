from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_companion.applications.interfaces.dtos.message import Message
from movie_companion.infrastructure.adapters.catalog.http_client import close_http_client
from movie_companion.infrastructure.config.settings import Settings
from movie_companion.infrastructure.logging.logger import Logger, setup_logging
from movie_companion.infrastructure.persistence.database import dispose_engine, get_engine, init_models, set_engine
from movie_companion.presentation.routers import auth, favorites, movies, quiz, ratings, recommendations, users

setup_logging()
logger = Logger.get_logger(__name__)

settings = Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    if settings.CREATE_TABLES:
        await init_models(engine)
        logger.info("Database tables ready")
    try:
        yield
    finally:
        await close_http_client()
        await dispose_engine()


app = FastAPI(title="Movie Companion", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router)
app.include_router(auth.router)
app.include_router(movies.router)
app.include_router(ratings.router)
app.include_router(favorites.router)
app.include_router(recommendations.router)
app.include_router(quiz.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie Companion API is running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "movie-companion"}
