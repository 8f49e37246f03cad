"""Application service functions."""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.candidates import ApplicationFilters
from api.services.common import (
    delete_record,
    fetch_by_id,
    insert_record,
    storage_operation,
    update_record,
)
from database.models import Application


async def list_applications(
    session: AsyncSession, filters: ApplicationFilters
) -> list[Application]:
    """List applications, most recently applied first."""
    query = select(Application)
    if filters.job_id is not None:
        query = query.where(Application.job_id == filters.job_id)
    if filters.candidate_id is not None:
        query = query.where(Application.candidate_id == filters.candidate_id)
    if filters.status:
        query = query.where(Application.status == filters.status)
    query = query.order_by(Application.applied_at.desc(), Application.id.desc())

    async with storage_operation(session, "list", "applications"):
        result = await session.execute(query)
        return list(result.scalars().all())


async def get_application(
    session: AsyncSession, application_id: int
) -> Optional[Application]:
    return await fetch_by_id(session, Application, application_id)


async def create_application(session: AsyncSession, data: dict[str, Any]) -> Application:
    return await insert_record(session, Application, data)


async def update_application(
    session: AsyncSession, application_id: int, changes: dict[str, Any]
) -> Application:
    return await update_record(session, Application, application_id, changes)


async def delete_application(session: AsyncSession, application_id: int) -> None:
    await delete_record(session, Application, application_id)
