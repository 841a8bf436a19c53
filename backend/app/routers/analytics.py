"""
Analytics API Router

Endpoints for study time analytics.

Endpoints:
- GET /api/analytics/summary - Minutes per subject, largest first
- GET /api/analytics/suggestion - The subject lagging behind this week, or null
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.enums.study import TimePeriod
from app.middleware.error_handling import handle_endpoint_errors
from app.middleware.rate_limit import limit_analytics
from app.models.analytics import StudySuggestion, SubjectTimeSummary
from app.services.analytics import AnalyticsSummaryService, SuggestionService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/analytics", tags=["analytics"])


# ===========================================
# Dependency Injection
# ===========================================


async def get_summary_service(
    db: AsyncSession = Depends(get_db),
) -> AnalyticsSummaryService:
    """Get analytics summary service."""
    return AnalyticsSummaryService(db)


async def get_suggestion_service(
    db: AsyncSession = Depends(get_db),
) -> SuggestionService:
    """Get suggestion service."""
    return SuggestionService(db)


# ===========================================
# Endpoints
# ===========================================


@router.get("/summary", response_model=list[SubjectTimeSummary])
@limit_analytics
@handle_endpoint_errors("Get analytics summary", "Failed to fetch analytics summary")
async def get_analytics_summary(
    request: Request,
    period: TimePeriod = Query(TimePeriod.ALL, description="How far back to look"),
    service: AnalyticsSummaryService = Depends(get_summary_service),
) -> list[SubjectTimeSummary]:
    """
    Total minutes studied per subject.

    Only subjects with at least one session in the period are listed.
    Ordered by total descending; equal totals by subject name.
    """
    return await service.get_summary(period)


@router.get("/suggestion", response_model=Optional[StudySuggestion])
@limit_analytics
@handle_endpoint_errors("Get study suggestion", "Failed to fetch study suggestion")
async def get_study_suggestion(
    request: Request,
    service: SuggestionService = Depends(get_suggestion_service),
) -> Optional[StudySuggestion]:
    """
    Suggest a subject to study next.

    Looks at the last SUGGESTION_WINDOW_DAYS days and returns the subject
    with the smallest non-zero share of study time below
    SUGGESTION_SHARE_THRESHOLD percent, or null if there is none.
    """
    return await service.get_suggestion()
