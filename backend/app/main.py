"""
Study Tracker API

FastAPI application for the study tracker dashboard: subjects, study
sessions, daily goals, todos, playlists and settings, plus the derived
dashboard and analytics endpoints.

Run locally:
    cd backend
    uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.db.base import init_db
from app.middleware import setup_error_handling, setup_rate_limiting
from app.routers import (
    analytics_router,
    dashboard_router,
    goals_router,
    health_router,
    playlists_router,
    sessions_router,
    settings_router,
    subjects_router,
    todos_router,
)

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure root logging from LOG_LEVEL (DEBUG=true forces debug output)."""
    level = logging.DEBUG if settings.DEBUG else getattr(
        logging, settings.LOG_LEVEL.upper(), logging.INFO
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} (timezone={settings.TIMEZONE})")

    if settings.DB_CREATE_TABLES:
        await init_db()

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware and routers."""
    app = FastAPI(title=f"{settings.APP_NAME} API", lifespan=lifespan)

    setup_error_handling(app, debug=settings.DEBUG)
    setup_rate_limiting(app, enabled=settings.RATE_LIMIT_ENABLED)

    # Added last so it wraps error responses too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router.router)
    app.include_router(subjects_router.router)
    app.include_router(sessions_router.router)
    app.include_router(goals_router.router)
    app.include_router(todos_router.router)
    app.include_router(playlists_router.router)
    app.include_router(settings_router.router)
    app.include_router(dashboard_router.router)
    app.include_router(analytics_router.router)

    return app


app = create_app()
