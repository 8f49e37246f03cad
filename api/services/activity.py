"""
Activity log service.

The activity log is append-only: there is a writer and two readers, and
nothing here updates or deletes a row.
"""

from typing import Any, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.activity import ActivityLogFilters
from api.services.common import fetch_by_id, insert_record, storage_operation
from database.models import ActivityLog

logger = logging.getLogger(__name__)


async def record_activity(
    session: AsyncSession,
    *,
    user_id: Optional[int],
    action: str,
    entity_type: str,
    entity_id: Optional[int],
    description: str,
    metadata: Optional[dict[str, Any]] = None,
) -> ActivityLog:
    """Append one audit entry. Call only after the mutation it describes committed."""
    entry = await insert_record(
        session,
        ActivityLog,
        {
            "user_id": user_id,
            "action": action,
            "entity_type": entity_type,
            "entity_id": entity_id,
            "description": description,
            "extra_metadata": metadata,
        },
    )
    logger.info(
        f"Activity recorded: {action} {entity_type}:{entity_id}",
        extra={"user_id": user_id, "action": action},
    )
    return entry


async def list_activity_logs(
    session: AsyncSession, filters: ActivityLogFilters
) -> list[ActivityLog]:
    """Most recent first; entries in the same instant are ordered by id."""
    query = select(ActivityLog)
    if filters.user_id is not None:
        query = query.where(ActivityLog.user_id == filters.user_id)
    query = query.order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc()).limit(
        filters.limit
    )

    async with storage_operation(session, "list", "activity_logs"):
        result = await session.execute(query)
        return list(result.scalars().all())


async def get_activity_log(session: AsyncSession, log_id: int) -> Optional[ActivityLog]:
    return await fetch_by_id(session, ActivityLog, log_id)
