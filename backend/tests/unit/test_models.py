"""
Unit tests for the Pydantic request/response models.

Verifies camelCase wire format, validation rules on request models and
reading ORM objects into response models.
"""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from app.db.models import DEFAULT_SUBJECT_COLOR, Subject
from app.enums.study import TimePeriod, TodoStatus
from app.models.analytics import DashboardStats, SubjectTimeSummary
from app.models.study import (
    DailyGoalCreate,
    DailyGoalUpdate,
    SettingUpdate,
    StudySessionCreate,
    SubjectCreate,
    SubjectResponse,
    SubjectUpdate,
    TodoCreate,
    TodoUpdate,
)


class TestSubjectModels:
    def test_default_color(self) -> None:
        assert SubjectCreate(name="Math").color == DEFAULT_SUBJECT_COLOR

    def test_name_is_stripped(self) -> None:
        assert SubjectCreate(name="  Math  ").name == "Math"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name: str) -> None:
        with pytest.raises(ValidationError):
            SubjectCreate(name=name)

    def test_unknown_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SubjectCreate.model_validate({"name": "Math", "icon": "x"})

    def test_response_from_orm(self) -> None:
        subject = Subject(id=1, name="Math", color="#2563eb")

        data = SubjectResponse.model_validate(subject).model_dump(by_alias=True)

        assert data == {"id": 1, "name": "Math", "color": "#2563eb", "createdAt": None}


class TestStudySessionCreate:
    def test_accepts_camel_case(self) -> None:
        data = StudySessionCreate.model_validate(
            {"subjectId": 1, "durationMinutes": 25, "notes": "flashcards"}
        )

        assert data.subject_id == 1
        assert data.duration_minutes == 25
        assert data.date is None

    @pytest.mark.parametrize("minutes", [0, -10])
    def test_duration_must_be_positive(self, minutes: int) -> None:
        with pytest.raises(ValidationError):
            StudySessionCreate(subject_id=1, duration_minutes=minutes)

    def test_date_requires_offset(self) -> None:
        with pytest.raises(ValidationError):
            StudySessionCreate(
                subject_id=1, duration_minutes=10, date="2026-03-10T09:00:00"
            )

    def test_date_with_offset(self) -> None:
        data = StudySessionCreate(
            subject_id=1, duration_minutes=10, date="2026-03-10T09:00:00Z"
        )
        assert data.date == datetime(2026, 3, 10, 9, 0, tzinfo=timezone.utc)


class TestOtherRequests:
    def test_goal_target_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            DailyGoalCreate(date=date(2026, 3, 10), target_minutes=0)

    def test_goal_defaults_completed_to_zero(self) -> None:
        goal = DailyGoalCreate.model_validate({"date": "2026-03-10", "targetMinutes": 60})
        assert goal.completed_minutes == 0

    def test_todo_defaults_to_pending(self) -> None:
        assert TodoCreate(subject_id=1, task="Revise").status == TodoStatus.PENDING

    def test_todo_rejects_unknown_status(self) -> None:
        with pytest.raises(ValidationError):
            TodoCreate(subject_id=1, task="Revise", status="archived")

    def test_setting_value_whitespace_becomes_empty(self) -> None:
        assert SettingUpdate(value="   ").value == ""


class TestAnalyticsModels:
    def test_dashboard_stats_wire_format(self) -> None:
        stats = DashboardStats(
            today_progress=30, total_sessions=4, pending_tasks=1, streak=2
        )

        assert stats.model_dump(by_alias=True) == {
            "todayProgress": 30,
            "totalSessions": 4,
            "pendingTasks": 1,
            "streak": 2,
        }

    def test_subject_summary_wire_format(self) -> None:
        item = SubjectTimeSummary(subject="Math", total_minutes=120, color="#2563eb")

        assert item.model_dump(by_alias=True) == {
            "subject": "Math",
            "totalMinutes": 120,
            "color": "#2563eb",
        }


class TestTimePeriod:
    def test_all_has_no_delta(self) -> None:
        assert TimePeriod.ALL.delta is None

    def test_week_delta(self) -> None:
        assert TimePeriod.WEEK.delta.days == 7


class TestPartialUpdates:
    def test_omitted_fields_are_unset(self) -> None:
        update = SubjectUpdate.model_validate({"color": "#000000"})

        assert update.model_dump(exclude_unset=True) == {"color": "#000000"}

    @pytest.mark.parametrize(
        "model,payload",
        [
            (SubjectUpdate, {"name": None}),
            (SubjectUpdate, {"color": None}),
            (DailyGoalUpdate, {"targetMinutes": None}),
            (TodoUpdate, {"status": None}),
            (TodoUpdate, {"subjectId": None}),
        ],
    )
    def test_explicit_null_rejected(self, model, payload) -> None:
        with pytest.raises(ValidationError):
            model.model_validate(payload)

    def test_todo_due_date_can_be_cleared(self) -> None:
        update = TodoUpdate.model_validate({"dueDate": None})

        assert update.model_dump(exclude_unset=True) == {"due_date": None}

    def test_setting_value_null_left_to_route(self) -> None:
        assert SettingUpdate.model_validate({"value": None}).value is None
