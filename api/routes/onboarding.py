"""
Onboarding checklist endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_active_user
from api.schemas.onboarding import (
    OnboardingTaskCreate,
    OnboardingTaskFilters,
    OnboardingTaskResponse,
    OnboardingTaskUpdate,
)
from api.services import onboarding as onboarding_service
from api.services.activity import record_activity
from database.engine import get_db
from database.models import User

router = APIRouter(prefix="/onboarding/tasks", tags=["onboarding"])


@router.get(
    "",
    response_model=list[OnboardingTaskResponse],
    summary="List Onboarding Tasks",
    description="Tasks ordered by due date; tasks without one come last.",
)
async def list_onboarding_tasks(
    employee_id: Optional[int] = Query(None, alias="employeeId", description="Filter by employee"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    filters = OnboardingTaskFilters(employee_id=employee_id)
    return await onboarding_service.list_onboarding_tasks(db, filters)


@router.get("/{task_id}", response_model=OnboardingTaskResponse, summary="Get Onboarding Task")
async def get_onboarding_task(
    task_id: int = Path(..., description="Task ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    task = await onboarding_service.get_onboarding_task(db, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Onboarding task not found")
    return task


@router.post(
    "",
    response_model=OnboardingTaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Onboarding Task",
)
async def create_onboarding_task(
    payload: OnboardingTaskCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    task = await onboarding_service.create_onboarding_task(
        db, payload.model_dump(exclude_none=True)
    )

    await record_activity(
        db,
        user_id=current_user.id,
        action="create_onboarding_task",
        entity_type="onboarding_task",
        entity_id=task.id,
        description=f"Created onboarding task: {task.title}",
    )
    return task


@router.put("/{task_id}", response_model=OnboardingTaskResponse, summary="Update Onboarding Task")
async def update_onboarding_task(
    payload: OnboardingTaskUpdate,
    task_id: int = Path(..., description="Task ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    """Setting status to ``completed`` stamps completedAt; leaving it clears it."""
    changes = payload.changes()
    task = await onboarding_service.update_onboarding_task(db, task_id, changes)

    await record_activity(
        db,
        user_id=current_user.id,
        action="update_onboarding_task",
        entity_type="onboarding_task",
        entity_id=task.id,
        description=f"Updated onboarding task: {task.title}",
        metadata={"fields": sorted(changes)},
    )
    return task


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Onboarding Task",
)
async def delete_onboarding_task(
    task_id: int = Path(..., description="Task ID"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_active_user),
):
    task = await onboarding_service.get_onboarding_task(db, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Onboarding task not found")
    await onboarding_service.delete_onboarding_task(db, task_id)

    await record_activity(
        db,
        user_id=current_user.id,
        action="delete_onboarding_task",
        entity_type="onboarding_task",
        entity_id=task_id,
        description=f"Deleted onboarding task: {task.title}",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
