"""
SQLAlchemy Database Models

These models define the PostgreSQL schema for the study tracker.

Tables:
- subjects: User-defined study categories
- study_sessions: Logged blocks of study time (immutable once created)
- daily_goals: One study-time target per calendar day
- todos: To-do tasks attached to a subject
- playlists: External video-learning links attached to a subject
- settings: Opaque key/value store for the web client

ARCHITECTURE NOTE:
    This file contains SQLALCHEMY models for database persistence.
    There are corresponding Pydantic models in app/models/study.py

    Deleting a subject deletes its sessions, todos and playlists
    (ON DELETE CASCADE, mirrored by passive_deletes on the ORM side).
"""

import datetime as dt
from typing import List, Optional

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.config import yaml_config
from app.db.base import Base
from app.enums.study import TodoStatus


DEFAULT_SUBJECT_COLOR: str = yaml_config.get("subjects", {}).get(
    "default_color", "#2563eb"
)


def _utc_now() -> dt.datetime:
    """Return current UTC time as timezone-aware datetime."""
    return dt.datetime.now(dt.timezone.utc)


class Subject(Base):
    """
    Study subject.

    A user-defined category (e.g. "Math") that sessions, todos and
    playlists are filed under. The color is purely presentational.
    """

    __tablename__ = "subjects"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    color: Mapped[str] = mapped_column(String(32), default=DEFAULT_SUBJECT_COLOR)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now
    )

    # Relationships
    sessions: Mapped[List["StudySession"]] = relationship(
        back_populates="subject", cascade="all, delete-orphan", passive_deletes=True
    )
    todos: Mapped[List["Todo"]] = relationship(
        back_populates="subject", cascade="all, delete-orphan", passive_deletes=True
    )
    playlists: Mapped[List["Playlist"]] = relationship(
        back_populates="subject", cascade="all, delete-orphan", passive_deletes=True
    )


class StudySession(Base):
    """
    One logged block of study time.

    Attributes:
        id: Primary key.
        subject_id: Subject the time was spent on.
        duration_minutes: Positive number of minutes studied.
        notes: Optional free-text notes.
        date: When the session happened. Defaults to insertion time and is
            the only timestamp the streak and "today" calculations look at.
    """

    __tablename__ = "study_sessions"

    id: Mapped[int] = mapped_column(primary_key=True)
    subject_id: Mapped[int] = mapped_column(
        ForeignKey("subjects.id", ondelete="CASCADE"), index=True
    )
    duration_minutes: Mapped[int] = mapped_column(Integer)
    notes: Mapped[Optional[str]] = mapped_column(Text)
    date: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now, index=True
    )

    subject: Mapped["Subject"] = relationship(back_populates="sessions")


class DailyGoal(Base):
    """Target study minutes for one calendar day (unique per date)."""

    __tablename__ = "daily_goals"

    id: Mapped[int] = mapped_column(primary_key=True)
    date: Mapped[dt.date] = mapped_column(Date, unique=True)
    target_minutes: Mapped[int] = mapped_column(Integer)
    completed_minutes: Mapped[int] = mapped_column(Integer, default=0)


class Todo(Base):
    """To-do task filed under a subject."""

    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(primary_key=True)
    subject_id: Mapped[int] = mapped_column(
        ForeignKey("subjects.id", ondelete="CASCADE"), index=True
    )
    task: Mapped[str] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        String(20), default=TodoStatus.PENDING.value, index=True
    )
    due_date: Mapped[Optional[dt.date]] = mapped_column(Date)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now
    )

    subject: Mapped["Subject"] = relationship(back_populates="todos")


class Playlist(Base):
    """Video-learning playlist link filed under a subject."""

    __tablename__ = "playlists"

    id: Mapped[int] = mapped_column(primary_key=True)
    subject_id: Mapped[int] = mapped_column(
        ForeignKey("subjects.id", ondelete="CASCADE"), index=True
    )
    name: Mapped[str] = mapped_column(String(500))
    url: Mapped[str] = mapped_column(String(2000))
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=_utc_now
    )

    subject: Mapped["Subject"] = relationship(back_populates="playlists")


class Setting(Base):
    """Client preference stored as an opaque key/value pair."""

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(primary_key=True)
    key: Mapped[str] = mapped_column(String(200), unique=True)
    value: Mapped[str] = mapped_column(Text)
