"""Job template service functions. Templates are soft-deleted."""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.jobs import JobTemplateFilters
from api.services.common import (
    check_salary_range,
    fetch_by_id,
    insert_record,
    storage_operation,
    update_record,
)
from database.errors import RecordNotFoundError
from database.models import JobTemplate


async def list_job_templates(
    session: AsyncSession, filters: JobTemplateFilters
) -> list[JobTemplate]:
    query = select(JobTemplate)
    if not filters.include_inactive:
        query = query.where(JobTemplate.is_active.is_(True))
    query = query.order_by(JobTemplate.created_at.desc(), JobTemplate.id.desc())

    async with storage_operation(session, "list", "job_templates"):
        result = await session.execute(query)
        return list(result.scalars().all())


async def get_job_template(session: AsyncSession, template_id: int) -> Optional[JobTemplate]:
    """Inactive (deleted) templates are reported as absent."""
    template = await fetch_by_id(session, JobTemplate, template_id)
    if template is None or not template.is_active:
        return None
    return template


async def create_job_template(session: AsyncSession, data: dict[str, Any]) -> JobTemplate:
    return await insert_record(session, JobTemplate, data)


async def update_job_template(
    session: AsyncSession, template_id: int, changes: dict[str, Any]
) -> JobTemplate:
    current = await get_job_template(session, template_id)
    if current is None:
        raise RecordNotFoundError(JobTemplate.__name__, template_id)
    check_salary_range(current, changes)
    return await update_record(session, JobTemplate, template_id, changes)


async def delete_job_template(session: AsyncSession, template_id: int) -> None:
    """Mark the template inactive. Deleting it twice is a not-found error."""
    if await get_job_template(session, template_id) is None:
        raise RecordNotFoundError(JobTemplate.__name__, template_id)
    await update_record(session, JobTemplate, template_id, {"is_active": False})
