"""
Study Streak Tracking

Counts consecutive local calendar days, ending today, on which at least
one study session was logged.

Usage:
    from app.services.analytics.streak_tracking import StreakTrackingService

    service = StreakTrackingService(db)
    streak = await service.get_current_streak()
"""

from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.middleware.error_handling import fallback_on_error
from app.services.analytics.time_utils import day_key, local_today
from app.services.storage import StudyStorage


def calculate_streak(
    session_dates: Iterable[datetime],
    today: date,
    lookback_days: Optional[int] = None,
) -> int:
    """
    Calculate the current study streak.

    Walks backward from ``today`` one day at a time and stops at the first
    day without a session. There is no grace day: if nothing was logged
    today the streak is 0.

    Args:
        session_dates: Session timestamps, in any order, duplicates allowed.
        today: Local calendar date the streak ends on.
        lookback_days: Maximum number of days to walk back
            (defaults to STREAK_LOOKBACK_DAYS).

    Returns:
        Streak length in days, between 0 and ``lookback_days``.
    """
    if lookback_days is None:
        lookback_days = settings.STREAK_LOOKBACK_DAYS

    study_days = {day_key(ts) for ts in session_dates}
    if not study_days:
        return 0

    streak = 0
    for offset in range(lookback_days):
        if today - timedelta(days=offset) not in study_days:
            break
        streak += 1

    return streak


class StreakTrackingService:
    """Reads session timestamps and derives the current streak."""

    def __init__(self, db: AsyncSession):
        """
        Initialize the streak tracking service.

        Args:
            db: SQLAlchemy async database session.
        """
        self.db = db
        self.storage = StudyStorage(db)

    @fallback_on_error(0, operation="Streak calculation")
    async def get_current_streak(self, now: Optional[datetime] = None) -> int:
        """
        Current streak in days.

        Any failure while reading sessions is logged and reported as a
        streak of 0 so that it never fails the dashboard.
        """
        session_dates = await self.storage.list_session_dates()
        return calculate_streak(session_dates, local_today(now))
