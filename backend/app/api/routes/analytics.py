"""
Analytics endpoints backing the dashboard and hiring analytics pages.
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_storage
from app.db.repository import Storage
from app.services.analytics import (
    DashboardSummary,
    HiringAnalytics,
    dashboard_summary,
    hiring_analytics,
)

router = APIRouter()


@router.get("/dashboard", response_model=DashboardSummary)
async def get_dashboard(storage: Storage = Depends(get_storage)):
    """Counts, recommendation buckets, recent jobs and top-scored candidates."""
    return dashboard_summary(storage)


@router.get("/hiring", response_model=HiringAnalytics)
async def get_hiring_analytics(storage: Storage = Depends(get_storage)):
    """
    Executive metrics for the hiring analytics page.

    Returns the active talent pool, average score, review backlog, score
    distribution, pipeline health and 30-day application velocity.
    """
    return hiring_analytics(storage)
