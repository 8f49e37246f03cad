"""
Interview scheduling endpoints.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_active_user
from api.schemas.interviews import (
    InterviewCreate,
    InterviewFilters,
    InterviewResponse,
    InterviewUpdate,
)
from api.services import interviews as interview_service
from api.services.activity import record_activity
from api.services.applications import get_application
from core.utils.datetime import today
from database.engine import get_db
from database.models import InterviewStatus, User

router = APIRouter(prefix="/interviews", tags=["interviews"])


@router.get(
    "",
    response_model=list[InterviewResponse],
    summary="List Interviews",
    description="List interviews in schedule order. `date` selects one UTC calendar day.",
)
async def list_interviews(
    on_date: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD"),
    interviewer_id: Optional[int] = Query(None, alias="interviewerId"),
    status: Optional[InterviewStatus] = Query(None, description="Filter by status"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    filters = InterviewFilters(on_date=on_date, interviewer_id=interviewer_id, status=status)
    return await interview_service.list_interviews(db, filters)


@router.get("/today", response_model=list[InterviewResponse], summary="Today's Interviews")
async def list_todays_interviews(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    return await interview_service.list_interviews(db, InterviewFilters(on_date=today()))


@router.get("/{interview_id}", response_model=InterviewResponse, summary="Get Interview")
async def get_interview(
    interview_id: int = Path(..., description="Interview ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    interview = await interview_service.get_interview(db, interview_id)
    if not interview:
        raise HTTPException(status_code=404, detail="Interview not found")
    return interview


@router.post(
    "",
    response_model=InterviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule Interview",
)
async def schedule_interview(
    payload: InterviewCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    if not await get_application(db, payload.application_id):
        raise HTTPException(status_code=404, detail="Application not found")

    interview = await interview_service.create_interview(
        db, payload.model_dump(exclude_none=True)
    )

    await record_activity(
        db,
        user_id=current_user.id,
        action="schedule_interview",
        entity_type="interview",
        entity_id=interview.id,
        description=(
            f"Scheduled {interview.type.value} interview for "
            f"{interview.scheduled_at:%Y-%m-%d %H:%M} UTC"
        ),
    )
    return interview


@router.put("/{interview_id}", response_model=InterviewResponse, summary="Update Interview")
async def update_interview(
    payload: InterviewUpdate,
    interview_id: int = Path(..., description="Interview ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    changes = payload.changes()
    interview = await interview_service.update_interview(db, interview_id, changes)

    await record_activity(
        db,
        user_id=current_user.id,
        action="update_interview",
        entity_type="interview",
        entity_id=interview.id,
        description=f"Updated interview #{interview.id} ({interview.status.value})",
        metadata={"fields": sorted(changes)},
    )
    return interview


@router.delete(
    "/{interview_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Interview",
)
async def delete_interview(
    interview_id: int = Path(..., description="Interview ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    await interview_service.delete_interview(db, interview_id)

    await record_activity(
        db,
        user_id=current_user.id,
        action="delete_interview",
        entity_type="interview",
        entity_id=interview_id,
        description=f"Deleted interview #{interview_id}",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
