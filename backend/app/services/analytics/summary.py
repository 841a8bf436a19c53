"""
Analytics Summary Service

Total study minutes per subject for the analytics chart, plus the
progress of a daily goal against the sessions actually logged that day.

Usage:
    from app.services.analytics.summary import AnalyticsSummaryService

    service = AnalyticsSummaryService(db)
    summary = await service.get_summary(TimePeriod.MONTH)
"""

from datetime import date, datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.enums.study import TimePeriod
from app.models.analytics import SubjectTimeSummary
from app.models.study import DailyGoalProgress
from app.services.analytics.time_utils import day_bounds, utc_now
from app.services.storage import StudyStorage


class AnalyticsSummaryService:
    """Per-subject time totals and goal progress."""

    def __init__(self, db: AsyncSession):
        """
        Initialize the analytics summary service.

        Args:
            db: SQLAlchemy async database session.
        """
        self.db = db
        self.storage = StudyStorage(db)

    async def get_summary(
        self,
        period: TimePeriod = TimePeriod.ALL,
        now: Optional[datetime] = None,
    ) -> list[SubjectTimeSummary]:
        """
        Minutes studied per subject, largest total first.

        Only subjects with at least one session in the period appear.
        Equal totals are ordered by subject name, then id.

        Args:
            period: How far back to look. ``TimePeriod.ALL`` counts every
                session ever logged.
            now: End of the period (defaults to the current time).
        """
        since = None
        if period.delta is not None:
            since = (now or utc_now()) - period.delta
        return await self.storage.summarize_minutes_by_subject(since=since)

    async def get_goal_progress(self, day: date) -> Optional[DailyGoalProgress]:
        """
        Progress towards the goal for ``day``.

        Returns:
            DailyGoalProgress, or None if no goal exists for that day.
        """
        goal = await self.storage.get_daily_goal(day)
        if goal is None:
            return None

        start, end = day_bounds(day)
        sessions = await self.storage.list_sessions_between(start, end)
        logged_minutes = sum(session.duration_minutes for session in sessions)

        percentage = 0.0
        if goal.target_minutes > 0:
            percentage = min(100.0, logged_minutes / goal.target_minutes * 100)

        return DailyGoalProgress(
            date=goal.date,
            target_minutes=goal.target_minutes,
            completed_minutes=goal.completed_minutes,
            logged_minutes=logged_minutes,
            percentage=round(percentage, 1),
        )
