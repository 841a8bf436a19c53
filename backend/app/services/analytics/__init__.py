"""
Study Analytics Services

Everything derived from study sessions rather than stored:

- StreakTrackingService: consecutive study days ending today
- DashboardService: dashboard header statistics
- AnalyticsSummaryService: minutes per subject, daily goal progress
- SuggestionService: the subject lagging behind in the recent window
"""

from app.services.analytics.dashboard import DashboardService
from app.services.analytics.streak_tracking import (
    StreakTrackingService,
    calculate_streak,
)
from app.services.analytics.suggestions import SuggestionService, find_lagging_subject
from app.services.analytics.summary import AnalyticsSummaryService

__all__ = [
    "AnalyticsSummaryService",
    "DashboardService",
    "StreakTrackingService",
    "SuggestionService",
    "calculate_streak",
    "find_lagging_subject",
]
