"""
Read-only access to the activity log.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_active_user
from api.schemas.activity import ActivityLogFilters, ActivityLogResponse
from api.services import activity as activity_service
from database.engine import get_db
from database.models import User

router = APIRouter(prefix="/activity-logs", tags=["activity"])


@router.get(
    "",
    response_model=list[ActivityLogResponse],
    summary="List Activity",
    description="Newest first. Without `userId`, returns the current user's activity.",
)
async def list_activity_logs(
    user_id: Optional[int] = Query(None, alias="userId"),
    limit: int = Query(50, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    filters = ActivityLogFilters(
        user_id=user_id if user_id is not None else current_user.id, limit=limit
    )
    return await activity_service.list_activity_logs(db, filters)


@router.get("/{log_id}", response_model=ActivityLogResponse, summary="Get Activity Entry")
async def get_activity_log(
    log_id: int = Path(..., description="Activity log ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    entry = await activity_service.get_activity_log(db, log_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Activity log not found")
    return entry
