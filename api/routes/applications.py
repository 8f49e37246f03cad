"""
Application endpoints: a candidate's application to a job.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_active_user
from api.schemas.candidates import (
    ApplicationCreate,
    ApplicationFilters,
    ApplicationResponse,
    ApplicationUpdate,
)
from api.services import applications as application_service
from api.services.activity import record_activity
from api.services.candidates import get_candidate
from api.services.jobs import get_job
from database.engine import get_db
from database.models import ApplicationStatus, User

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=list[ApplicationResponse], summary="List Applications")
async def list_applications(
    job_id: Optional[int] = Query(None, alias="jobId", description="Filter by job"),
    candidate_id: Optional[int] = Query(None, alias="candidateId", description="Filter by candidate"),
    status: Optional[ApplicationStatus] = Query(None, description="Filter by status"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    filters = ApplicationFilters(job_id=job_id, candidate_id=candidate_id, status=status)
    return await application_service.list_applications(db, filters)


@router.get("/{application_id}", response_model=ApplicationResponse, summary="Get Application")
async def get_application(
    application_id: int = Path(..., description="Application ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    application = await application_service.get_application(db, application_id)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")
    return application


@router.post(
    "",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Application",
)
async def create_application(
    payload: ApplicationCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    """The referenced job and candidate must exist."""
    job = await get_job(db, payload.job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    candidate = await get_candidate(db, payload.candidate_id)
    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")

    application = await application_service.create_application(
        db, payload.model_dump(exclude_none=True)
    )

    await record_activity(
        db,
        user_id=current_user.id,
        action="create_application",
        entity_type="application",
        entity_id=application.id,
        description=f"New application: {candidate.full_name} for {job.title}",
    )
    return application


@router.put("/{application_id}", response_model=ApplicationResponse, summary="Update Application")
async def update_application(
    payload: ApplicationUpdate,
    application_id: int = Path(..., description="Application ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    changes = payload.changes()
    application = await application_service.update_application(db, application_id, changes)

    await record_activity(
        db,
        user_id=current_user.id,
        action="update_application",
        entity_type="application",
        entity_id=application.id,
        description=f"Updated application #{application.id} ({application.status.value})",
        metadata={"fields": sorted(changes)},
    )
    return application


@router.delete(
    "/{application_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Application",
)
async def delete_application(
    application_id: int = Path(..., description="Application ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    await application_service.delete_application(db, application_id)

    await record_activity(
        db,
        user_id=current_user.id,
        action="delete_application",
        entity_type="application",
        entity_id=application_id,
        description=f"Deleted application #{application_id}",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
