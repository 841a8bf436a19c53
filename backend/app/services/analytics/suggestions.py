"""
Smart Study Suggestions

Flags the subject that has been comparatively neglected over a rolling
window. A subject is a candidate when its share of all minutes studied in
the window is above 0% and below the threshold (20% by default). Among
candidates the smallest share wins; on equal shares the subject listed
first wins.

Subjects that were not studied at all in the window are never suggested:
with a 0% share there is nothing to compare against.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.db.models import StudySession, Subject
from app.models.analytics import StudySuggestion
from app.models.study import SubjectResponse
from app.services.analytics.time_utils import utc_now
from app.services.storage import StudyStorage

logger = logging.getLogger(__name__)


def find_lagging_subject(
    subjects: Sequence[Subject],
    sessions: Sequence[StudySession],
    now: datetime,
    window_days: Optional[int] = None,
    threshold: Optional[float] = None,
) -> Optional[StudySuggestion]:
    """
    Pick the subject with the lowest non-zero share of recent study time.

    Args:
        subjects: Known subjects, in display order (ties resolve to the
            earliest one here).
        sessions: Sessions to consider. Anything older than the window is
            ignored, so passing the full history is fine.
        now: End of the window.
        window_days: Window length (defaults to SUGGESTION_WINDOW_DAYS).
        threshold: Share percentage a subject must stay below
            (defaults to SUGGESTION_SHARE_THRESHOLD).

    Returns:
        StudySuggestion, or None when nothing qualifies.
    """
    if window_days is None:
        window_days = settings.SUGGESTION_WINDOW_DAYS
    if threshold is None:
        threshold = settings.SUGGESTION_SHARE_THRESHOLD

    cutoff = now - timedelta(days=window_days)
    minutes_by_subject: dict[int, int] = {}
    for session in sessions:
        if session.date >= cutoff:
            minutes_by_subject[session.subject_id] = (
                minutes_by_subject.get(session.subject_id, 0) + session.duration_minutes
            )

    total_minutes = sum(minutes_by_subject.values())
    if not subjects or total_minutes == 0:
        return None

    best: Optional[tuple[Subject, int, float]] = None
    for subject in subjects:
        minutes = minutes_by_subject.get(subject.id, 0)
        percentage = minutes / total_minutes * 100
        if not 0 < percentage < threshold:
            continue
        # Strict comparison keeps the first subject on equal shares
        if best is None or percentage < best[2]:
            best = (subject, minutes, percentage)

    if best is None:
        return None

    subject, minutes, percentage = best
    return StudySuggestion(
        subject=SubjectResponse.model_validate(subject),
        total_minutes=minutes,
        percentage=round(percentage, 1),
        message=f"You're lagging in {subject.name}. Consider adding a session today.",
    )


class SuggestionService:
    """Loads subjects and recent sessions and runs the lagging-subject check."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.storage = StudyStorage(db)

    async def get_suggestion(
        self, now: Optional[datetime] = None
    ) -> Optional[StudySuggestion]:
        now = now or utc_now()
        cutoff = now - timedelta(days=settings.SUGGESTION_WINDOW_DAYS)

        subjects = await self.storage.list_subjects()
        sessions = await self.storage.list_sessions_since(cutoff)

        suggestion = find_lagging_subject(subjects, sessions, now)
        if suggestion is not None:
            logger.debug(
                f"Suggesting {suggestion.subject.name} "
                f"({suggestion.percentage}% of the last "
                f"{settings.SUGGESTION_WINDOW_DAYS} days)"
            )
        return suggestion
