"""
Session authentication.

A login creates a row in ``user_sessions`` and hands the client an opaque
token in an httpOnly cookie. Each protected request resolves that token back
to an active user with a single joined query; nothing is cached between
requests, so deactivating a user or deleting a session takes effect on the
very next call.
"""

import logging
from typing import Optional

from fastapi import Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import settings
from core.utils.datetime import now
from database.models import User, UserSession

logger = logging.getLogger(__name__)

class AuthenticationError(Exception):
    """Base exception for authentication errors."""
    pass


class SessionMissingError(AuthenticationError):
    """No session cookie on the request."""
    pass


class SessionInvalidError(AuthenticationError):
    """Unknown or expired session token."""
    pass


class UserInactiveError(AuthenticationError):
    """User account has been deactivated."""
    pass


def extract_session_token(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.session_cookie_name)
    return token or None


async def resolve_session_user(db: AsyncSession, token: Optional[str]) -> User:
    """
    Resolve a session token to its user in one round trip.

    Raises:
        SessionMissingError: If no token was supplied
        SessionInvalidError: If the token is unknown or the session expired
        UserInactiveError: If the user has been deactivated
    """
    if not token:
        raise SessionMissingError("No session token")

    result = await db.execute(
        select(User)
        .join(UserSession, UserSession.user_id == User.id)
        .where(
            UserSession.session_token == token,
            UserSession.expires_at > now(),
        )
    )
    user = result.scalar_one_or_none()

    if user is None:
        raise SessionInvalidError("Session not found or expired")
    if not user.is_active:
        raise UserInactiveError(f"User {user.id} is inactive")
    return user
