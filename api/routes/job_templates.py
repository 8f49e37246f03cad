"""
Job template endpoints. Deleting a template deactivates it.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_active_user
from api.schemas.jobs import (
    JobTemplateCreate,
    JobTemplateFilters,
    JobTemplateResponse,
    JobTemplateUpdate,
)
from api.services import job_templates as template_service
from api.services.activity import record_activity
from database.engine import get_db
from database.models import User

router = APIRouter(prefix="/job-templates", tags=["job templates"])


@router.get("", response_model=list[JobTemplateResponse], summary="List Job Templates")
async def list_job_templates(
    include_inactive: bool = Query(False, alias="includeInactive"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    filters = JobTemplateFilters(include_inactive=include_inactive)
    return await template_service.list_job_templates(db, filters)


@router.get("/{template_id}", response_model=JobTemplateResponse, summary="Get Job Template")
async def get_job_template(
    template_id: int = Path(..., description="Template ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    template = await template_service.get_job_template(db, template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Job template not found")
    return template


@router.post(
    "",
    response_model=JobTemplateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Job Template",
)
async def create_job_template(
    payload: JobTemplateCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    template = await template_service.create_job_template(
        db, payload.model_dump(exclude_none=True)
    )

    await record_activity(
        db,
        user_id=current_user.id,
        action="create_job_template",
        entity_type="job_template",
        entity_id=template.id,
        description=f"Created job template: {template.name}",
    )
    return template


@router.put("/{template_id}", response_model=JobTemplateResponse, summary="Update Job Template")
async def update_job_template(
    payload: JobTemplateUpdate,
    template_id: int = Path(..., description="Template ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    changes = payload.changes()
    template = await template_service.update_job_template(db, template_id, changes)

    await record_activity(
        db,
        user_id=current_user.id,
        action="update_job_template",
        entity_type="job_template",
        entity_id=template.id,
        description=f"Updated job template: {template.name}",
        metadata={"fields": sorted(changes)},
    )
    return template


@router.delete(
    "/{template_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Job Template",
)
async def delete_job_template(
    template_id: int = Path(..., description="Template ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    template = await template_service.get_job_template(db, template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Job template not found")
    await template_service.delete_job_template(db, template_id)

    await record_activity(
        db,
        user_id=current_user.id,
        action="delete_job_template",
        entity_type="job_template",
        entity_id=template_id,
        description=f"Deleted job template: {template.name}",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
