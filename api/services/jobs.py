"""Job service functions."""

from typing import Any, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.jobs import JobFilters
from api.services.common import (
    check_salary_range,
    delete_record,
    fetch_by_id,
    insert_record,
    storage_operation,
    update_record,
)
from database.models import Job

logger = logging.getLogger(__name__)


async def list_jobs(session: AsyncSession, filters: JobFilters) -> list[Job]:
    """
    List jobs, newest first.

    Every filter that is set narrows the result (AND); unset filters are
    ignored.
    """
    query = select(Job)
    if filters.status:
        query = query.where(Job.status == filters.status)
    if filters.department:
        query = query.where(Job.department == filters.department)

    query = query.order_by(Job.created_at.desc(), Job.id.desc())
    if filters.limit:
        query = query.limit(filters.limit)

    async with storage_operation(session, "list", "jobs"):
        result = await session.execute(query)
        return list(result.scalars().all())


async def get_job(session: AsyncSession, job_id: int) -> Optional[Job]:
    return await fetch_by_id(session, Job, job_id)


async def create_job(session: AsyncSession, data: dict[str, Any]) -> Job:
    job = await insert_record(session, Job, data)
    logger.info(f"Created job {job.id} ({job.status.value})")
    return job


async def update_job(session: AsyncSession, job_id: int, changes: dict[str, Any]) -> Job:
    current = await fetch_by_id(session, Job, job_id)
    if current is not None:
        check_salary_range(current, changes)
    return await update_record(session, Job, job_id, changes)


async def delete_job(session: AsyncSession, job_id: int) -> None:
    await delete_record(session, Job, job_id)
