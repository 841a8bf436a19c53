"""
Pydantic Models for Dashboard and Analytics Responses

None of these are persisted; every value is recomputed from the
study_sessions, todos and subjects tables on each request.
"""

from app.models.base import StrictResponse
from app.models.study import SubjectResponse


class DashboardStats(StrictResponse):
    """
    Summary shown at the top of the dashboard.

    Serialized as ``{todayProgress, totalSessions, pendingTasks, streak}``.
    """

    today_progress: int  # Minutes studied today (local day)
    total_sessions: int
    pending_tasks: int
    streak: int  # Consecutive days ending today


class SubjectTimeSummary(StrictResponse):
    """
    Total study time for one subject.

    One entry per subject with at least one session; the summary endpoint
    returns them ordered by ``total_minutes`` descending.
    """

    subject: str  # Subject name
    total_minutes: int
    color: str


class StudySuggestion(StrictResponse):
    """
    A subject that has been comparatively neglected in the recent window.

    ``percentage`` is the subject's share of all minutes studied in the
    window, always strictly between 0 and the configured threshold.
    """

    subject: SubjectResponse
    total_minutes: int
    percentage: float
    message: str
