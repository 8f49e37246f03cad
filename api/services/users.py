"""
User service functions: accounts, employees and login sessions.
"""

from datetime import timedelta
from typing import Any, Optional
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.users import UserFilters
from api.services.common import (
    fetch_by_id,
    insert_record,
    storage_operation,
    update_record,
)
from core.config import settings
from core.security import generate_session_token
from core.utils.datetime import now
from database.models import User, UserSession

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user(session: AsyncSession, user_id: int) -> Optional[User]:
    return await fetch_by_id(session, User, user_id)


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    async with storage_operation(session, "load", "users"):
        result = await session.execute(
            select(User).where(User.email == normalize_email(email))
        )
        return result.scalar_one_or_none()


async def create_user(session: AsyncSession, data: dict[str, Any]) -> User:
    """Create an account. ``data`` must carry password_hash, never a raw password."""
    data = {**data, "email": normalize_email(data["email"])}
    if not data.get("department"):
        data["department"] = "General"
    user = await insert_record(session, User, data)
    logger.info(f"Created user {user.id} with role {user.role.value}")
    return user


async def list_users(session: AsyncSession, filters: UserFilters) -> list[User]:
    query = select(User)
    if filters.role:
        query = query.where(User.role == filters.role)
    if filters.department:
        query = query.where(User.department == filters.department)
    if filters.is_active is not None:
        query = query.where(User.is_active.is_(filters.is_active))
    query = query.order_by(User.last_name.asc(), User.first_name.asc(), User.id.asc())

    async with storage_operation(session, "list", "users"):
        result = await session.execute(query)
        return list(result.scalars().all())


async def update_user(
    session: AsyncSession, user_id: int, changes: dict[str, Any]
) -> User:
    if changes.get("email"):
        changes = {**changes, "email": normalize_email(changes["email"])}
    return await update_record(session, User, user_id, changes)


# ==================== Sessions ===================== #
async def create_session(
    session: AsyncSession,
    user: User,
    *,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> UserSession:
    """Open a login session for ``user`` and return it (token included)."""
    return await insert_record(
        session,
        UserSession,
        {
            "session_token": generate_session_token(),
            "user_id": user.id,
            "expires_at": now() + timedelta(days=settings.session_ttl_days),
            "ip_address": ip_address,
            "user_agent": user_agent[:500] if user_agent else None,
        },
    )


async def delete_session(session: AsyncSession, token: str) -> bool:
    """Remove a session by token. Returns False if there was none."""
    async with storage_operation(session, "delete", "user_sessions"):
        result = await session.execute(
            delete(UserSession).where(UserSession.session_token == token)
        )
        await session.commit()
    return result.rowcount > 0
