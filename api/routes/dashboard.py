"""Dashboard endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from api.dependencies import require_active_user
from api.schemas.activity import ActivityLogFilters, ActivityLogResponse, DashboardStats
from api.services.activity import list_activity_logs
from api.services.dashboard import get_dashboard_stats
from database.engine import get_db, get_session_factory
from database.models import User

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Dashboard Counters",
    description=(
        "openPositions: active jobs. activeCandidates: reviewing, shortlisted or "
        "interviewing. interviewsToday: not cancelled/rescheduled, current UTC day. "
        "newHires: hired within the rolling new-hire window (30 days by default)."
    ),
)
async def dashboard_stats(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    current_user: User = Depends(require_active_user),
):
    return await get_dashboard_stats(session_factory)


@router.get(
    "/recent-activity",
    response_model=list[ActivityLogResponse],
    summary="Recent Activity",
    description="Latest activity across all users.",
)
async def recent_activity(
    limit: int = Query(10, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    return await list_activity_logs(db, ActivityLogFilters(limit=limit))
