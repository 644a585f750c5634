import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api import matches
from app.core.config import Settings, settings as default_settings
from app.core.database import Base, create_db_engine, create_session_factory
from app.core.logging import setup_logging
from app.repositories.base import MatchRepository
from app.repositories.memory import InMemoryMatchRepository, MatchStore
from app.repositories.mock_data import generate_mock_matches
from app.repositories.sql import SqlMatchRepository
from app.services.matches import MatchService

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> MatchRepository:
    """Create the match store once, seeded with the generated dataset."""
    mock_matches = generate_mock_matches(
        count=settings.MOCK_MATCH_COUNT,
        seed=settings.MOCK_SEED,
    )

    if settings.MATCH_STORE == "memory":
        return InMemoryMatchRepository(
            MatchStore(mock_matches),
            default_limit=settings.DEFAULT_PAGE_LIMIT,
        )

    if settings.MATCH_STORE == "database":
        engine = create_db_engine(settings.DATABASE_URL)
        # Create tables
        Base.metadata.create_all(bind=engine)
        repository = SqlMatchRepository(
            create_session_factory(engine),
            default_limit=settings.DEFAULT_PAGE_LIMIT,
        )
        repository.seed(mock_matches)
        return repository

    raise ValueError(f"Unknown MATCH_STORE: {settings.MATCH_STORE!r}")


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[MatchRepository] = None,
) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Match listings for football predictions",
        version="1.0.0"
    )

    if repository is None:
        repository = build_repository(settings)
    app.state.match_service = MatchService(repository, max_limit=settings.MAX_PAGE_LIMIT)
    logger.info("Match service ready (store=%s)", type(repository).__name__)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(matches.router, prefix="/api/matches", tags=["matches"])

    @app.get("/")
    async def root():
        return {"message": settings.APP_NAME}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
