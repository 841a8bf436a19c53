"""
Unit Tests for DashboardService.

The four reads are stubbed on the service's storage; these tests check
how they are combined, the local-day window used for today's progress,
and that failures are all-or-nothing except for the streak.
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from app.enums.study import TodoStatus
from app.models.analytics import DashboardStats
from app.services.analytics.dashboard import DashboardService


@pytest.fixture
def service(mock_db_session) -> DashboardService:
    """DashboardService with every storage read stubbed."""
    service = DashboardService(mock_db_session)
    service.storage.list_sessions_between = AsyncMock(
        return_value=[
            SimpleNamespace(duration_minutes=30),
            SimpleNamespace(duration_minutes=45),
        ]
    )
    service.storage.count_sessions = AsyncMock(return_value=12)
    service.storage.count_todos = AsyncMock(return_value=4)
    service.streaks.storage.list_session_dates = AsyncMock(return_value=[])
    return service


class TestGetStats:
    @pytest.mark.asyncio
    async def test_combines_reads(self, service, fixed_now) -> None:
        service.streaks.storage.list_session_dates = AsyncMock(
            return_value=[fixed_now, fixed_now - timedelta(days=1)]
        )

        stats = await service.get_stats(fixed_now)

        assert stats == DashboardStats(
            today_progress=75, total_sessions=12, pending_tasks=4, streak=2
        )

    @pytest.mark.asyncio
    async def test_counts_pending_todos_only(self, service, fixed_now) -> None:
        await service.get_stats(fixed_now)

        service.storage.count_todos.assert_awaited_once_with(TodoStatus.PENDING)

    @pytest.mark.asyncio
    async def test_today_window_is_local_day(self, service, fixed_now) -> None:
        await service.get_stats(fixed_now)

        start, end = service.storage.list_sessions_between.await_args.args
        assert start == datetime(2026, 3, 10, tzinfo=start.tzinfo)
        assert end.date() == fixed_now.date()
        assert end - start < timedelta(days=1)
        assert start <= fixed_now <= end

    @pytest.mark.asyncio
    async def test_no_sessions_today(self, service, fixed_now) -> None:
        service.storage.list_sessions_between = AsyncMock(return_value=[])

        stats = await service.get_stats(fixed_now)

        assert stats.today_progress == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "failing_read", ["list_sessions_between", "count_sessions", "count_todos"]
    )
    async def test_core_read_failure_propagates(
        self, service, fixed_now, failing_read
    ) -> None:
        setattr(
            service.storage, failing_read, AsyncMock(side_effect=RuntimeError("boom"))
        )

        with pytest.raises(RuntimeError):
            await service.get_stats(fixed_now)

    @pytest.mark.asyncio
    async def test_streak_failure_degrades_to_0(self, service, fixed_now) -> None:
        service.streaks.storage.list_session_dates = AsyncMock(
            side_effect=RuntimeError("boom")
        )

        stats = await service.get_stats(fixed_now)

        assert stats.streak == 0
        assert stats.total_sessions == 12

    @pytest.mark.asyncio
    async def test_serializes_camel_case(self, service, fixed_now) -> None:
        stats = await service.get_stats(fixed_now)

        assert set(stats.model_dump(by_alias=True)) == {
            "todayProgress",
            "totalSessions",
            "pendingTasks",
            "streak",
        }
