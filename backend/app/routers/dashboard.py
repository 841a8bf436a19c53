"""
Dashboard API Router

Endpoints:
- GET /api/dashboard/stats - Today's minutes, session count, pending todos, streak
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.middleware.error_handling import handle_endpoint_errors
from app.middleware.rate_limit import limit_analytics
from app.models.analytics import DashboardStats
from app.services.analytics import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


async def get_dashboard_service(
    db: AsyncSession = Depends(get_db),
) -> DashboardService:
    """Get dashboard service."""
    return DashboardService(db)


@router.get("/stats", response_model=DashboardStats)
@limit_analytics
@handle_endpoint_errors("Get dashboard stats", "Failed to fetch dashboard stats")
async def get_dashboard_stats(
    request: Request,
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStats:
    """
    Get the dashboard header statistics.

    Returns:
    - todayProgress: minutes studied today
    - totalSessions: number of logged sessions
    - pendingTasks: number of pending todos
    - streak: consecutive study days ending today (0 if the streak
      cannot be computed)

    Any other failure yields a single 500; partial stats are never returned.
    """
    return await service.get_stats()
