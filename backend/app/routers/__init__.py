"""API Routers package."""

from app.routers import analytics as analytics_router
from app.routers import dashboard as dashboard_router
from app.routers import goals as goals_router
from app.routers import health as health_router
from app.routers import playlists as playlists_router
from app.routers import sessions as sessions_router
from app.routers import settings as settings_router
from app.routers import subjects as subjects_router
from app.routers import todos as todos_router

__all__ = [
    "analytics_router",
    "dashboard_router",
    "goals_router",
    "health_router",
    "playlists_router",
    "sessions_router",
    "settings_router",
    "subjects_router",
    "todos_router",
]
