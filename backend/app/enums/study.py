"""
Study Tracking Enums

Defines enums for to-do status and analytics time windows.
"""

from datetime import timedelta
from enum import Enum
from typing import Optional


class TodoStatus(str, Enum):
    """
    Lifecycle of a to-do task.

    Only PENDING tasks count towards the dashboard's pending task total.
    """

    PENDING = "pending"
    COMPLETED = "completed"


class TimePeriod(str, Enum):
    """
    Time periods for analytics queries.

    Used by the analytics summary endpoint to restrict the sessions that
    are aggregated. ALL applies no restriction.
    """

    WEEK = "7d"
    MONTH = "30d"
    QUARTER = "90d"
    YEAR = "1y"
    ALL = "all"

    @property
    def delta(self) -> Optional[timedelta]:
        """Length of the period, or None for ALL."""
        return {
            TimePeriod.WEEK: timedelta(days=7),
            TimePeriod.MONTH: timedelta(days=30),
            TimePeriod.QUARTER: timedelta(days=90),
            TimePeriod.YEAR: timedelta(days=365),
        }.get(self)
