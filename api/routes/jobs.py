"""
Job posting management endpoints.

Every successful create, update and delete is followed by one activity log
entry attributed to the acting user.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_active_user
from api.schemas.jobs import JobCreate, JobFilters, JobResponse, JobUpdate
from api.services import jobs as job_service
from api.services.activity import record_activity
from database.engine import get_db
from database.models import JobStatus, User

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get(
    "",
    response_model=list[JobResponse],
    summary="List Jobs",
    description="List job postings, newest first. Filters combine with AND.",
)
async def list_jobs(
    status: Optional[JobStatus] = Query(None, description="Filter by status"),
    department: Optional[str] = Query(None, description="Filter by department"),
    limit: Optional[int] = Query(None, ge=1, le=500, description="Maximum results"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    filters = JobFilters(status=status, department=department, limit=limit)
    return await job_service.list_jobs(db, filters)


@router.get("/{job_id}", response_model=JobResponse, summary="Get Job Details")
async def get_job(
    job_id: int = Path(..., description="Job ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    job = await job_service.get_job(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Job",
    description="Create a job posting. The poster is the current user.",
)
async def create_job(
    payload: JobCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    data = payload.model_dump(exclude_none=True)
    data["posted_by"] = current_user.id
    job = await job_service.create_job(db, data)

    await record_activity(
        db,
        user_id=current_user.id,
        action="create_job",
        entity_type="job",
        entity_id=job.id,
        description=f"Created job posting: {job.title}",
    )
    return job


@router.put("/{job_id}", response_model=JobResponse, summary="Update Job")
async def update_job(
    payload: JobUpdate,
    job_id: int = Path(..., description="Job ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    """Apply the fields present in the body; everything else is left as is."""
    changes = payload.changes()
    job = await job_service.update_job(db, job_id, changes)

    await record_activity(
        db,
        user_id=current_user.id,
        action="update_job",
        entity_type="job",
        entity_id=job.id,
        description=f"Updated job posting: {job.title}",
        metadata={"fields": sorted(changes)},
    )
    return job


@router.delete(
    "/{job_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Job",
)
async def delete_job(
    job_id: int = Path(..., description="Job ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    job = await job_service.get_job(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    await job_service.delete_job(db, job_id)

    await record_activity(
        db,
        user_id=current_user.id,
        action="delete_job",
        entity_type="job",
        entity_id=job_id,
        description=f"Deleted job posting: {job.title}",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
