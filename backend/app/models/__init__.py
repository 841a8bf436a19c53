"""Pydantic models for the application."""

from app.models.analytics import (
    DashboardStats,
    StudySuggestion,
    SubjectTimeSummary,
)
from app.models.study import (
    DailyGoalResponse,
    StudySessionResponse,
    SubjectResponse,
    TodoResponse,
)

__all__ = [
    "DashboardStats",
    "StudySuggestion",
    "SubjectTimeSummary",
    "DailyGoalResponse",
    "StudySessionResponse",
    "SubjectResponse",
    "TodoResponse",
]
