"""Candidate service functions."""

from typing import Any, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.candidates import CandidateFilters
from api.services.common import (
    delete_record,
    fetch_by_id,
    insert_record,
    storage_operation,
    update_record,
)
from database.models import Candidate

logger = logging.getLogger(__name__)


def has_all_skills(candidate: Candidate, required: list[str]) -> bool:
    """Case-insensitive check that the candidate lists every required skill."""
    owned = {skill.strip().lower() for skill in candidate.skills or []}
    return all(skill.strip().lower() in owned for skill in required if skill.strip())


async def list_candidates(
    session: AsyncSession, filters: CandidateFilters
) -> list[Candidate]:
    """
    List candidates, newest first.

    status and experience are SQL predicates. skills lives in a JSON column
    whose containment operators differ per backend, so it is applied to the
    fetched rows instead.
    """
    query = select(Candidate)
    if filters.status:
        query = query.where(Candidate.status == filters.status)
    if filters.experience is not None:
        query = query.where(Candidate.experience == filters.experience)
    query = query.order_by(Candidate.created_at.desc(), Candidate.id.desc())

    async with storage_operation(session, "list", "candidates"):
        result = await session.execute(query)
        candidates = list(result.scalars().all())

    if filters.skills:
        candidates = [c for c in candidates if has_all_skills(c, filters.skills)]
    return candidates


async def get_candidate(session: AsyncSession, candidate_id: int) -> Optional[Candidate]:
    return await fetch_by_id(session, Candidate, candidate_id)


async def get_candidate_by_email(session: AsyncSession, email: str) -> Optional[Candidate]:
    async with storage_operation(session, "load", "candidates"):
        result = await session.execute(
            select(Candidate).where(Candidate.email == email)
        )
        return result.scalar_one_or_none()


async def create_candidate(session: AsyncSession, data: dict[str, Any]) -> Candidate:
    candidate = await insert_record(session, Candidate, data)
    logger.info(f"Created candidate {candidate.id} from source {candidate.source.value}")
    return candidate


async def update_candidate(
    session: AsyncSession, candidate_id: int, changes: dict[str, Any]
) -> Candidate:
    return await update_record(session, Candidate, candidate_id, changes)


async def delete_candidate(session: AsyncSession, candidate_id: int) -> None:
    await delete_record(session, Candidate, candidate_id)
