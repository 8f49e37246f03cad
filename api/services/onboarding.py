"""Onboarding task service functions."""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.onboarding import OnboardingTaskFilters
from api.services.common import (
    delete_record,
    fetch_by_id,
    insert_record,
    storage_operation,
    update_record,
)
from core.utils.datetime import now
from database.models import OnboardingTask, TaskStatus


def _stamp_completion(data: dict[str, Any]) -> dict[str, Any]:
    """Keep completed_at in step with a status in ``data``."""
    if "status" not in data or "completed_at" in data:
        return data
    stamped = dict(data)
    stamped["completed_at"] = now() if data["status"] == TaskStatus.COMPLETED else None
    return stamped


async def list_onboarding_tasks(
    session: AsyncSession, filters: OnboardingTaskFilters
) -> list[OnboardingTask]:
    """List tasks by due date; tasks without a due date come last."""
    query = select(OnboardingTask)
    if filters.employee_id is not None:
        query = query.where(OnboardingTask.employee_id == filters.employee_id)
    query = query.order_by(
        OnboardingTask.due_date.is_(None),
        OnboardingTask.due_date.asc(),
        OnboardingTask.id.asc(),
    )

    async with storage_operation(session, "list", "onboarding_tasks"):
        result = await session.execute(query)
        return list(result.scalars().all())


async def get_onboarding_task(
    session: AsyncSession, task_id: int
) -> Optional[OnboardingTask]:
    return await fetch_by_id(session, OnboardingTask, task_id)


async def create_onboarding_task(
    session: AsyncSession, data: dict[str, Any]
) -> OnboardingTask:
    return await insert_record(session, OnboardingTask, _stamp_completion(data))


async def update_onboarding_task(
    session: AsyncSession, task_id: int, changes: dict[str, Any]
) -> OnboardingTask:
    current = await fetch_by_id(session, OnboardingTask, task_id)
    # re-saving an already completed task keeps its original timestamp
    if current is not None and current.status == changes.get("status"):
        changes = {k: v for k, v in changes.items() if k != "status"}
    return await update_record(session, OnboardingTask, task_id, _stamp_completion(changes))


async def delete_onboarding_task(session: AsyncSession, task_id: int) -> None:
    await delete_record(session, OnboardingTask, task_id)
