"""
Pydantic Models for Study Tracking Resources

Request and response models for subjects, study sessions, daily goals,
todos, playlists and settings.

ARCHITECTURE NOTE:
    This file contains PYDANTIC models for API validation.
    There is a corresponding SQLAlchemy file: app/db/models.py

    Data flows: Route → StrictRequest → StudyStorage → SQLAlchemy → Database
"""

import datetime as dt
from typing import Optional

from pydantic import AwareDatetime, Field

from app.db.models import DEFAULT_SUBJECT_COLOR
from app.enums.study import TodoStatus
from app.models.base import PartialUpdate, StrictRequest, StrictResponse


# ===========================================
# Subjects
# ===========================================


class SubjectCreate(StrictRequest):
    """Request to create a subject. Whitespace-only names are rejected."""

    name: str = Field(..., min_length=1, max_length=200)
    color: str = Field(DEFAULT_SUBJECT_COLOR, min_length=1, max_length=32)


class SubjectUpdate(PartialUpdate):
    """Partial subject update; omitted fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    color: Optional[str] = Field(None, min_length=1, max_length=32)


class SubjectResponse(StrictResponse):
    id: int
    name: str
    color: str
    created_at: Optional[dt.datetime] = None


# ===========================================
# Study Sessions
# ===========================================


class StudySessionCreate(StrictRequest):
    """
    Request to log a study session.

    Sessions are immutable once created. ``date`` defaults to the time
    of insertion; supplying it allows back-filling a session that was
    not logged live. It must carry a UTC offset.
    """

    subject_id: int
    duration_minutes: int = Field(..., gt=0, description="Minutes studied")
    notes: Optional[str] = None
    date: Optional[AwareDatetime] = None


class StudySessionResponse(StrictResponse):
    id: int
    subject_id: int
    duration_minutes: int
    notes: Optional[str] = None
    date: dt.datetime


class StudySessionWithSubject(StudySessionResponse):
    """Study session with its subject embedded, as listed by the API."""

    subject: SubjectResponse


# ===========================================
# Daily Goals
# ===========================================


class DailyGoalCreate(StrictRequest):
    """Create (or replace) the goal for a calendar day."""

    date: dt.date
    target_minutes: int = Field(..., gt=0)
    completed_minutes: int = Field(0, ge=0)


class DailyGoalUpdate(PartialUpdate):
    """
    Partial goal update.

    ``date`` may be echoed back by the client but must match the date in
    the URL.
    """

    nullable_fields = frozenset({"date"})

    date: Optional[dt.date] = None
    target_minutes: Optional[int] = Field(None, gt=0)
    completed_minutes: Optional[int] = Field(None, ge=0)


class DailyGoalResponse(StrictResponse):
    id: int
    date: dt.date
    target_minutes: int
    completed_minutes: int


class DailyGoalProgress(StrictResponse):
    """
    Progress towards a daily goal.

    ``logged_minutes`` is recomputed from the sessions logged on that local
    day; ``completed_minutes`` is the value stored on the goal itself.
    ``percentage`` is capped at 100.
    """

    date: dt.date
    target_minutes: int
    completed_minutes: int
    logged_minutes: int
    percentage: float


# ===========================================
# Todos
# ===========================================


class TodoCreate(StrictRequest):
    subject_id: int
    task: str = Field(..., min_length=1)
    status: TodoStatus = TodoStatus.PENDING
    due_date: Optional[dt.date] = None


class TodoUpdate(PartialUpdate):
    nullable_fields = frozenset({"due_date"})

    subject_id: Optional[int] = None
    task: Optional[str] = Field(None, min_length=1)
    status: Optional[TodoStatus] = None
    due_date: Optional[dt.date] = None


class TodoResponse(StrictResponse):
    id: int
    subject_id: int
    task: str
    status: TodoStatus
    due_date: Optional[dt.date] = None
    created_at: Optional[dt.datetime] = None


class TodoWithSubject(TodoResponse):
    subject: SubjectResponse


# ===========================================
# Playlists
# ===========================================


class PlaylistCreate(StrictRequest):
    subject_id: int
    name: str = Field(..., min_length=1, max_length=500)
    url: str = Field(..., min_length=1, max_length=2000)


class PlaylistUpdate(PartialUpdate):
    subject_id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=500)
    url: Optional[str] = Field(None, min_length=1, max_length=2000)


class PlaylistResponse(StrictResponse):
    id: int
    subject_id: int
    name: str
    url: str
    created_at: Optional[dt.datetime] = None


class PlaylistWithSubject(PlaylistResponse):
    subject: SubjectResponse


# ===========================================
# Settings
# ===========================================


class SettingCreate(StrictRequest):
    key: str = Field(..., min_length=1, max_length=200)
    value: str


class SettingUpdate(PartialUpdate):
    """Only the value of a setting can change. Empty values are rejected."""

    nullable_fields = frozenset({"value"})

    value: Optional[str] = None


class SettingResponse(StrictResponse):
    id: int
    key: str
    value: str
