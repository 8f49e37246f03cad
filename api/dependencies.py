"""FastAPI dependencies for dependency injection."""

import logging

from fastapi import Depends, HTTPException, status, Request
from sqlalchemy.ext.asyncio import AsyncSession

from core.middleware.authentication import (
    AuthenticationError,
    extract_session_token,
    resolve_session_user,
)
from database.engine import get_db
from database.models import User

logger = logging.getLogger(__name__)

UNAUTHORIZED = "Unauthorized"


async def require_active_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Require a valid session belonging to an active user.

    Every failure (no cookie, unknown or expired session, deactivated user)
    produces the same 401 so callers cannot tell them apart.
    """
    try:
        user = await resolve_session_user(db, extract_session_token(request))
    except AuthenticationError as exc:
        logger.info(
            f"Rejected request to {request.url.path}: {type(exc).__name__}"
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED,
        )

    request.state.user = user
    # plain id for the logging middleware; the ORM instance may be expired
    # by a rollback before the response is logged
    request.state.user_id = user.id
    return user
