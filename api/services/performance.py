"""Performance review service functions."""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.performance import PerformanceReviewFilters
from api.services.common import (
    delete_record,
    fetch_by_id,
    insert_record,
    storage_operation,
    update_record,
)
from core.utils.datetime import now
from database.models import PerformanceReview, ReviewStatus

# status -> timestamp column stamped the first time a review reaches it
_STATUS_TIMESTAMPS = {
    ReviewStatus.SUBMITTED: "submitted_at",
    ReviewStatus.REVIEWED: "reviewed_at",
}


def _stamp_status(data: dict[str, Any], current: Optional[PerformanceReview] = None):
    column = _STATUS_TIMESTAMPS.get(data.get("status"))
    if column is None or column in data:
        return data
    if current is not None and getattr(current, column) is not None:
        return data
    return {**data, column: now()}


async def list_performance_reviews(
    session: AsyncSession, filters: PerformanceReviewFilters
) -> list[PerformanceReview]:
    """List reviews, newest first."""
    query = select(PerformanceReview)
    if filters.employee_id is not None:
        query = query.where(PerformanceReview.employee_id == filters.employee_id)
    query = query.order_by(PerformanceReview.created_at.desc(), PerformanceReview.id.desc())

    async with storage_operation(session, "list", "performance_reviews"):
        result = await session.execute(query)
        return list(result.scalars().all())


async def get_performance_review(
    session: AsyncSession, review_id: int
) -> Optional[PerformanceReview]:
    return await fetch_by_id(session, PerformanceReview, review_id)


async def create_performance_review(
    session: AsyncSession, data: dict[str, Any]
) -> PerformanceReview:
    return await insert_record(session, PerformanceReview, _stamp_status(data))


async def update_performance_review(
    session: AsyncSession, review_id: int, changes: dict[str, Any]
) -> PerformanceReview:
    current = await fetch_by_id(session, PerformanceReview, review_id)
    return await update_record(
        session, PerformanceReview, review_id, _stamp_status(changes, current)
    )


async def delete_performance_review(session: AsyncSession, review_id: int) -> None:
    await delete_record(session, PerformanceReview, review_id)
