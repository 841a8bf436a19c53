"""
Study Storage

Persistence layer for subjects, study sessions, daily goals, todos,
playlists and settings, plus the two derived queries the analytics
services build on: date-range session lookup and per-subject duration
totals.

Listing queries that "join the subject" use an inner join, so rows whose
subject no longer exists never reach the analytics layer.

Usage:
    from app.services.storage import StudyStorage

    storage = StudyStorage(db)
    sessions = await storage.list_sessions_between(start, end)
    summary = await storage.summarize_minutes_by_subject()
"""

import logging
from datetime import date, datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from app.db.models import DailyGoal, Playlist, Setting, StudySession, Subject, Todo
from app.enums.study import TodoStatus
from app.models.analytics import SubjectTimeSummary
from app.models.study import (
    DailyGoalUpdate,
    PlaylistCreate,
    PlaylistUpdate,
    SettingCreate,
    StudySessionCreate,
    SubjectCreate,
    SubjectUpdate,
    TodoCreate,
    TodoUpdate,
)

logger = logging.getLogger(__name__)


class UnknownSubjectError(Exception):
    """Raised when a record references a subject id that does not exist."""

    def __init__(self, subject_id: int):
        self.subject_id = subject_id
        super().__init__(f"Subject {subject_id} does not exist")


class DuplicateSettingError(Exception):
    """Raised when creating a setting whose key is already taken."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Setting '{key}' already exists")


class StudyStorage:
    """
    Data access for the study tracker.

    Every method runs against the request-scoped session passed in.
    Writes are committed immediately; reads see whatever is committed
    at the time they run.
    """

    def __init__(self, db: AsyncSession):
        """Initialize storage with a database session."""
        self.db = db

    # ===========================================
    # Subjects
    # ===========================================

    async def list_subjects(self) -> list[Subject]:
        """All subjects ordered by name."""
        result = await self.db.execute(select(Subject).order_by(Subject.name, Subject.id))
        return list(result.scalars().all())

    async def get_subject(self, subject_id: int) -> Optional[Subject]:
        return await self.db.get(Subject, subject_id)

    async def create_subject(self, data: SubjectCreate) -> Subject:
        subject = Subject(name=data.name, color=data.color)
        return await self._save(subject)

    async def update_subject(
        self, subject_id: int, data: SubjectUpdate
    ) -> Optional[Subject]:
        subject = await self.get_subject(subject_id)
        if subject is None:
            return None
        self._apply(subject, data)
        return await self._save(subject)

    async def delete_subject(self, subject_id: int) -> bool:
        """
        Delete a subject together with its sessions, todos and playlists.

        Returns:
            False if the subject did not exist.
        """
        subject = await self.get_subject(subject_id)
        if subject is None:
            return False
        await self.db.delete(subject)
        await self.db.commit()
        logger.info(f"Deleted subject {subject_id} and its dependent records")
        return True

    # ===========================================
    # Study Sessions
    # ===========================================

    def _sessions_with_subject(self):
        """Base query: sessions inner-joined to their subject, newest first."""
        return (
            select(StudySession)
            .join(StudySession.subject)
            .options(contains_eager(StudySession.subject))
            .order_by(StudySession.date.desc(), StudySession.id.desc())
        )

    async def list_sessions(self) -> list[StudySession]:
        """All sessions with their subject, newest first."""
        result = await self.db.execute(self._sessions_with_subject())
        return list(result.scalars().all())

    async def list_sessions_between(
        self, start: datetime, end: datetime
    ) -> list[StudySession]:
        """Sessions with ``start <= date <= end``, subject joined, newest first."""
        query = self._sessions_with_subject().where(
            StudySession.date >= start, StudySession.date <= end
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def list_sessions_since(self, cutoff: datetime) -> list[StudySession]:
        """Sessions with ``date >= cutoff``, subject joined, newest first."""
        query = self._sessions_with_subject().where(StudySession.date >= cutoff)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def list_session_dates(self) -> list[datetime]:
        """Timestamps of every session whose subject exists."""
        result = await self.db.execute(
            select(StudySession.date).join(StudySession.subject)
        )
        return [row[0] for row in result.all()]

    async def count_sessions(self) -> int:
        result = await self.db.execute(
            select(func.count(StudySession.id)).join(StudySession.subject)
        )
        return result.scalar() or 0

    async def get_session(self, session_id: int) -> Optional[StudySession]:
        return await self.db.get(StudySession, session_id)

    async def create_session(self, data: StudySessionCreate) -> StudySession:
        """
        Log a study session.

        Raises:
            UnknownSubjectError: If ``data.subject_id`` does not exist.
        """
        await self._require_subject(data.subject_id)
        session = StudySession(
            subject_id=data.subject_id,
            duration_minutes=data.duration_minutes,
            notes=data.notes,
        )
        if data.date is not None:
            session.date = data.date
        return await self._save(session)

    # ===========================================
    # Daily Goals
    # ===========================================

    async def list_daily_goals(self) -> list[DailyGoal]:
        """All goals, most recent date first."""
        result = await self.db.execute(select(DailyGoal).order_by(DailyGoal.date.desc()))
        return list(result.scalars().all())

    async def get_daily_goal(self, day: date) -> Optional[DailyGoal]:
        result = await self.db.execute(select(DailyGoal).where(DailyGoal.date == day))
        return result.scalar_one_or_none()

    async def upsert_daily_goal(
        self,
        day: date,
        target_minutes: int,
        completed_minutes: Optional[int] = None,
    ) -> DailyGoal:
        """
        Create the goal for ``day`` or update the existing one.

        ``completed_minutes`` left as None keeps the stored value (0 for
        a new goal).
        """
        goal = await self.get_daily_goal(day)
        if goal is None:
            goal = DailyGoal(date=day, target_minutes=target_minutes, completed_minutes=0)
        else:
            goal.target_minutes = target_minutes
        if completed_minutes is not None:
            goal.completed_minutes = completed_minutes
        return await self._save(goal)

    async def update_daily_goal(
        self, day: date, data: DailyGoalUpdate
    ) -> Optional[DailyGoal]:
        goal = await self.get_daily_goal(day)
        if goal is None:
            return None
        self._apply(goal, data, exclude={"date"})
        return await self._save(goal)

    # ===========================================
    # Todos
    # ===========================================

    async def list_todos(self) -> list[Todo]:
        """Todos with their subject, by due date (undated last) then creation."""
        result = await self.db.execute(
            select(Todo)
            .join(Todo.subject)
            .options(contains_eager(Todo.subject))
            .order_by(Todo.due_date.asc().nulls_last(), Todo.created_at, Todo.id)
        )
        return list(result.scalars().all())

    async def count_todos(self, status: TodoStatus) -> int:
        result = await self.db.execute(
            select(func.count(Todo.id)).where(Todo.status == status.value)
        )
        return result.scalar() or 0

    async def get_todo(self, todo_id: int) -> Optional[Todo]:
        return await self.db.get(Todo, todo_id)

    async def create_todo(self, data: TodoCreate) -> Todo:
        await self._require_subject(data.subject_id)
        todo = Todo(
            subject_id=data.subject_id,
            task=data.task,
            status=data.status.value,
            due_date=data.due_date,
        )
        return await self._save(todo)

    async def update_todo(self, todo_id: int, data: TodoUpdate) -> Optional[Todo]:
        todo = await self.get_todo(todo_id)
        if todo is None:
            return None
        if data.subject_id is not None:
            await self._require_subject(data.subject_id)
        self._apply(todo, data)
        if data.status is not None:
            todo.status = data.status.value
        return await self._save(todo)

    async def delete_todo(self, todo_id: int) -> bool:
        return await self._delete(await self.get_todo(todo_id))

    # ===========================================
    # Playlists
    # ===========================================

    async def list_playlists(self) -> list[Playlist]:
        result = await self.db.execute(
            select(Playlist)
            .join(Playlist.subject)
            .options(contains_eager(Playlist.subject))
            .order_by(Playlist.name, Playlist.id)
        )
        return list(result.scalars().all())

    async def get_playlist(self, playlist_id: int) -> Optional[Playlist]:
        return await self.db.get(Playlist, playlist_id)

    async def create_playlist(self, data: PlaylistCreate) -> Playlist:
        await self._require_subject(data.subject_id)
        playlist = Playlist(subject_id=data.subject_id, name=data.name, url=data.url)
        return await self._save(playlist)

    async def update_playlist(
        self, playlist_id: int, data: PlaylistUpdate
    ) -> Optional[Playlist]:
        playlist = await self.get_playlist(playlist_id)
        if playlist is None:
            return None
        if data.subject_id is not None:
            await self._require_subject(data.subject_id)
        self._apply(playlist, data)
        return await self._save(playlist)

    async def delete_playlist(self, playlist_id: int) -> bool:
        return await self._delete(await self.get_playlist(playlist_id))

    # ===========================================
    # Settings
    # ===========================================

    async def list_settings(self) -> list[Setting]:
        result = await self.db.execute(select(Setting).order_by(Setting.key))
        return list(result.scalars().all())

    async def get_setting(self, key: str) -> Optional[Setting]:
        result = await self.db.execute(select(Setting).where(Setting.key == key))
        return result.scalar_one_or_none()

    async def create_setting(self, data: SettingCreate) -> Setting:
        """
        Raises:
            DuplicateSettingError: If the key already exists.
        """
        if await self.get_setting(data.key) is not None:
            raise DuplicateSettingError(data.key)
        return await self._save(Setting(key=data.key, value=data.value))

    async def update_setting(self, key: str, value: str) -> Optional[Setting]:
        setting = await self.get_setting(key)
        if setting is None:
            return None
        setting.value = value
        return await self._save(setting)

    # ===========================================
    # Aggregations
    # ===========================================

    async def summarize_minutes_by_subject(
        self, since: Optional[datetime] = None
    ) -> list[SubjectTimeSummary]:
        """
        Total session minutes per subject, largest first.

        Subjects without sessions (in the window, when ``since`` is given)
        are omitted. Equal totals are ordered by subject name, then id.

        Args:
            since: Only count sessions with ``date >= since``.
        """
        total = func.sum(StudySession.duration_minutes).label("total_minutes")
        query = (
            select(Subject.name, total, Subject.color)
            .join(StudySession, StudySession.subject_id == Subject.id)
            .group_by(Subject.id, Subject.name, Subject.color)
            .order_by(total.desc(), Subject.name.asc(), Subject.id.asc())
        )
        if since is not None:
            query = query.where(StudySession.date >= since)

        result = await self.db.execute(query)
        return [
            SubjectTimeSummary(
                subject=row.name,
                total_minutes=int(row.total_minutes or 0),
                color=row.color,
            )
            for row in result.all()
        ]

    # ===========================================
    # Helpers
    # ===========================================

    async def _require_subject(self, subject_id: int) -> None:
        if await self.get_subject(subject_id) is None:
            raise UnknownSubjectError(subject_id)

    @staticmethod
    def _apply(obj, data, exclude: Optional[set[str]] = None) -> None:
        """Copy the fields a partial-update model actually set onto ``obj``."""
        for field, value in data.model_dump(exclude_unset=True, exclude=exclude).items():
            setattr(obj, field, value)

    async def _save(self, obj):
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def _delete(self, obj) -> bool:
        if obj is None:
            return False
        await self.db.delete(obj)
        await self.db.commit()
        return True
