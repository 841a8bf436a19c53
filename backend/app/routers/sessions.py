"""
Study Sessions API Router

Sessions are append-only: there are no update or delete endpoints.

Endpoints:
- GET /api/study-sessions - All sessions with their subject, newest first
- POST /api/study-sessions - Log a session
- GET /api/study-sessions/date-range - Sessions between two bounds (inclusive)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.dependencies import get_study_storage
from app.middleware.error_handling import ValidationError, handle_endpoint_errors
from app.models.study import (
    StudySessionCreate,
    StudySessionResponse,
    StudySessionWithSubject,
)
from app.services.analytics.time_utils import parse_range_bound
from app.services.storage import StudyStorage, UnknownSubjectError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/study-sessions", tags=["study-sessions"])


@router.get("", response_model=list[StudySessionWithSubject])
@handle_endpoint_errors("Get study sessions", "Failed to fetch study sessions")
async def list_sessions(
    storage: StudyStorage = Depends(get_study_storage),
):
    return await storage.list_sessions()


@router.post(
    "", response_model=StudySessionResponse, status_code=status.HTTP_201_CREATED
)
@handle_endpoint_errors("Create study session", "Failed to create study session")
async def create_session(
    data: StudySessionCreate,
    storage: StudyStorage = Depends(get_study_storage),
):
    """
    Log a study session.

    Omit ``date`` to timestamp the session with the current time.
    """
    try:
        session = await storage.create_session(data)
    except UnknownSubjectError as e:
        raise ValidationError(
            "Invalid study session data", details={"subject_id": e.subject_id}
        )
    logger.info(
        f"Logged {session.duration_minutes} min for subject {session.subject_id}"
    )
    return session


@router.get("/date-range", response_model=list[StudySessionWithSubject])
@handle_endpoint_errors("Get study sessions by date range", "Failed to fetch study sessions")
async def list_sessions_in_range(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    storage: StudyStorage = Depends(get_study_storage),
):
    """
    Sessions whose timestamp lies between ``startDate`` and ``endDate``.

    Both bounds are inclusive. A plain ``YYYY-MM-DD`` covers that whole
    local day; full ISO-8601 timestamps are used as given.
    """
    if not start_date or not end_date:
        raise ValidationError("Start date and end date are required")

    try:
        start = parse_range_bound(start_date)
        end = parse_range_bound(end_date, end=True)
    except ValueError:
        raise ValidationError("Invalid date format")

    return await storage.list_sessions_between(start, end)
