"""Interview service functions."""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.interviews import InterviewFilters
from api.services.common import (
    delete_record,
    fetch_by_id,
    insert_record,
    storage_operation,
    update_record,
)
from core.utils.datetime import day_bounds
from database.models import Interview


async def list_interviews(
    session: AsyncSession, filters: InterviewFilters
) -> list[Interview]:
    """
    List interviews in schedule order.

    on_date matches interviews scheduled within that UTC calendar day.
    """
    query = select(Interview)
    if filters.on_date is not None:
        start, end = day_bounds(filters.on_date)
        query = query.where(Interview.scheduled_at >= start, Interview.scheduled_at < end)
    if filters.interviewer_id is not None:
        query = query.where(Interview.interviewer_id == filters.interviewer_id)
    if filters.status:
        query = query.where(Interview.status == filters.status)
    query = query.order_by(Interview.scheduled_at.asc(), Interview.id.asc())

    async with storage_operation(session, "list", "interviews"):
        result = await session.execute(query)
        return list(result.scalars().all())


async def get_interview(session: AsyncSession, interview_id: int) -> Optional[Interview]:
    return await fetch_by_id(session, Interview, interview_id)


async def create_interview(session: AsyncSession, data: dict[str, Any]) -> Interview:
    return await insert_record(session, Interview, data)


async def update_interview(
    session: AsyncSession, interview_id: int, changes: dict[str, Any]
) -> Interview:
    return await update_record(session, Interview, interview_id, changes)


async def delete_interview(session: AsyncSession, interview_id: int) -> None:
    await delete_record(session, Interview, interview_id)
