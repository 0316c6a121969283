import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quiz_api.config import Settings
from quiz_api.database import build_engine, build_sessionmaker, create_tables
from quiz_api.routers.auth import router as auth_router
from quiz_api.routers.quiz import router as quiz_router
from quiz_api.services.auth_service import AuthService
from quiz_api.services.credential_store import CredentialStore
from quiz_api.services.quiz_store import QuizStore
from quiz_api.utils.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)

SERVICE_NAME = "quiz-api"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables(app.state.engine)
    logger.info("Database ready")
    yield
    await app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Quiz API",
        description="Authenticated CRUD API for quiz questions",
        version=VERSION,
        lifespan=lifespan,
    )

    engine = build_engine(settings.database_url)
    session_factory = build_sessionmaker(engine)
    auth_service = AuthService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        token_ttl=timedelta(seconds=settings.token_ttl_seconds),
        bcrypt_rounds=settings.bcrypt_rounds,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.auth_service = auth_service
    app.state.credential_store = CredentialStore(session_factory, auth_service)
    app.state.quiz_store = QuizStore(session_factory)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(quiz_router)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "service": SERVICE_NAME, "version": VERSION}

    return app
