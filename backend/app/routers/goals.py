"""
Daily Goals API Router

A goal is keyed by its calendar date; there is at most one per day.

Endpoints:
- GET /api/daily-goals - All goals, newest date first
- GET /api/daily-goals/{date} - Goal for one day
- GET /api/daily-goals/{date}/progress - Goal vs. minutes actually logged
- POST /api/daily-goals - Create or replace the goal for a day
- PUT /api/daily-goals/{date} - Partial update
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.dependencies import get_study_storage
from app.middleware.error_handling import (
    NotFoundError,
    ValidationError,
    handle_endpoint_errors,
)
from app.models.study import (
    DailyGoalCreate,
    DailyGoalProgress,
    DailyGoalResponse,
    DailyGoalUpdate,
)
from app.services.analytics import AnalyticsSummaryService
from app.services.storage import StudyStorage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/daily-goals", tags=["daily-goals"])


async def get_summary_service(
    db: AsyncSession = Depends(get_db),
) -> AnalyticsSummaryService:
    """Get analytics summary service."""
    return AnalyticsSummaryService(db)


@router.get("", response_model=list[DailyGoalResponse])
@handle_endpoint_errors("Get daily goals", "Failed to fetch daily goals")
async def list_daily_goals(
    storage: StudyStorage = Depends(get_study_storage),
):
    return await storage.list_daily_goals()


@router.get("/{goal_date}", response_model=DailyGoalResponse)
@handle_endpoint_errors("Get daily goal", "Failed to fetch daily goal")
async def get_daily_goal(
    goal_date: date,
    storage: StudyStorage = Depends(get_study_storage),
):
    goal = await storage.get_daily_goal(goal_date)
    if goal is None:
        raise NotFoundError("Goal not found")
    return goal


@router.get("/{goal_date}/progress", response_model=DailyGoalProgress)
@handle_endpoint_errors("Get daily goal progress", "Failed to fetch daily goal progress")
async def get_daily_goal_progress(
    goal_date: date,
    service: AnalyticsSummaryService = Depends(get_summary_service),
):
    """
    Progress towards the goal for ``goal_date``.

    ``loggedMinutes`` is summed from the sessions logged that local day;
    ``percentage`` is capped at 100.
    """
    progress = await service.get_goal_progress(goal_date)
    if progress is None:
        raise NotFoundError("Goal not found")
    return progress


@router.post("", response_model=DailyGoalResponse, status_code=status.HTTP_201_CREATED)
@handle_endpoint_errors("Create daily goal", "Failed to create daily goal")
async def create_daily_goal(
    data: DailyGoalCreate,
    storage: StudyStorage = Depends(get_study_storage),
):
    """Create the goal for ``date``, replacing the existing one if any."""
    goal = await storage.upsert_daily_goal(
        data.date, data.target_minutes, data.completed_minutes
    )
    logger.info(f"Set daily goal for {goal.date}: {goal.target_minutes} min")
    return goal


@router.put("/{goal_date}", response_model=DailyGoalResponse)
@handle_endpoint_errors("Update daily goal", "Failed to update daily goal")
async def update_daily_goal(
    goal_date: date,
    data: DailyGoalUpdate,
    storage: StudyStorage = Depends(get_study_storage),
):
    """
    Update the goal for ``goal_date``.

    When no goal exists yet it is created, provided ``targetMinutes`` is
    given.
    """
    if data.date is not None and data.date != goal_date:
        raise ValidationError("Goal date does not match the URL")

    goal = await storage.update_daily_goal(goal_date, data)
    if goal is not None:
        return goal

    if data.target_minutes is None:
        raise NotFoundError("Goal not found")
    return await storage.upsert_daily_goal(
        goal_date, data.target_minutes, data.completed_minutes
    )
