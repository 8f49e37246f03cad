"""
Dashboard aggregates.

The four counters are independent, so they run concurrently, each on its
own session (an AsyncSession cannot run two statements at once).
"""

import asyncio
from datetime import datetime
from typing import Optional
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from api.services.common import storage_operation
from core.config import settings
from core.utils.datetime import day_bounds, days_ago, now as utcnow
from database.models import (
    ACTIVE_CANDIDATE_STATUSES,
    INACTIVE_INTERVIEW_STATUSES,
    Candidate,
    CandidateStatus,
    Interview,
    Job,
    JobStatus,
)

logger = logging.getLogger(__name__)


async def _count(session_factory: async_sessionmaker[AsyncSession], model, *conditions) -> int:
    async with session_factory() as session:
        async with storage_operation(session, "count", model.__tablename__):
            result = await session.execute(
                select(func.count()).select_from(model).where(*conditions)
            )
            return result.scalar_one()


async def get_dashboard_stats(
    session_factory: async_sessionmaker[AsyncSession],
    now: Optional[datetime] = None,
) -> dict[str, int]:
    """
    Counts shown on the dashboard.

    - open_positions: jobs whose status is exactly ``active``
    - active_candidates: candidates being reviewed, shortlisted or interviewed
    - interviews_today: interviews scheduled in the current UTC day that were
      not cancelled or rescheduled
    - new_hires: hired candidates whose record changed within the configured
      rolling window (DASHBOARD_NEW_HIRE_WINDOW_DAYS)
    """
    now = now or utcnow()
    day_start, day_end = day_bounds(now)
    hire_cutoff = days_ago(settings.dashboard_new_hire_window_days, now)

    open_positions, active_candidates, interviews_today, new_hires = await asyncio.gather(
        _count(session_factory, Job, Job.status == JobStatus.ACTIVE),
        _count(
            session_factory,
            Candidate,
            Candidate.status.in_(ACTIVE_CANDIDATE_STATUSES),
        ),
        _count(
            session_factory,
            Interview,
            Interview.scheduled_at >= day_start,
            Interview.scheduled_at < day_end,
            Interview.status.not_in(INACTIVE_INTERVIEW_STATUSES),
        ),
        _count(
            session_factory,
            Candidate,
            Candidate.status == CandidateStatus.HIRED,
            Candidate.updated_at >= hire_cutoff,
        ),
    )
    stats = {
        "open_positions": open_positions,
        "active_candidates": active_candidates,
        "interviews_today": interviews_today,
        "new_hires": new_hires,
    }
    logger.debug(f"Dashboard stats computed: {stats}")
    return stats
