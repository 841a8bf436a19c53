"""
Dashboard Statistics Service

Composes the dashboard header from four reads against the request's
database session:

- today's studied minutes (local day boundaries)
- total number of sessions
- number of pending todos
- current streak

The reads run one after another on the same AsyncSession. A failure in
any of the first three propagates; the streak degrades to 0.

Usage:
    from app.services.analytics.dashboard import DashboardService

    service = DashboardService(db)
    stats = await service.get_stats()
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.enums.study import TodoStatus
from app.models.analytics import DashboardStats
from app.services.analytics.streak_tracking import StreakTrackingService
from app.services.analytics.time_utils import day_bounds, local_today
from app.services.storage import StudyStorage

logger = logging.getLogger(__name__)


class DashboardService:
    """Builds DashboardStats from the current state of the database."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.storage = StudyStorage(db)
        self.streaks = StreakTrackingService(db)

    async def get_stats(self, now: Optional[datetime] = None) -> DashboardStats:
        """
        Get dashboard statistics.

        Args:
            now: Reference time (defaults to the current time).

        Returns:
            DashboardStats, computed fresh on every call.
        """
        today_progress = await self.get_today_progress(now)
        total_sessions = await self.storage.count_sessions()
        pending_tasks = await self.storage.count_todos(TodoStatus.PENDING)
        streak = await self.streaks.get_current_streak(now)

        logger.debug(
            f"Dashboard stats: today={today_progress}min sessions={total_sessions} "
            f"pending={pending_tasks} streak={streak}"
        )

        return DashboardStats(
            today_progress=today_progress,
            total_sessions=total_sessions,
            pending_tasks=pending_tasks,
            streak=streak,
        )

    async def get_today_progress(self, now: Optional[datetime] = None) -> int:
        """Minutes studied during the current local day."""
        start, end = day_bounds(local_today(now))
        sessions = await self.storage.list_sessions_between(start, end)
        return sum(session.duration_minutes for session in sessions)
