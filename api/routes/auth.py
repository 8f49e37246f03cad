"""
Authentication endpoints: signup, login, logout and the current user.

Login issues a server-side session whose opaque token travels in an httpOnly
cookie; there are no bearer tokens.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import require_active_user
from api.schemas.users import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    UserResponse,
)
from api.schemas.common import MessageResponse
from api.services import activity as activity_service
from api.services import users as user_service
from core.config import settings
from core.middleware.authentication import extract_session_token
from core.security import hash_password_async, verify_password_async
from database.engine import get_db
from database.models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"])

INVALID_CREDENTIALS = "Invalid credentials"


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Account",
)
async def signup(
    payload: SignupRequest,
    db: AsyncSession = Depends(get_db),
):
    """Register a new employee account. Does not log the user in."""
    if await user_service.get_user_by_email(db, payload.email) is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists with this email",
        )

    data = payload.model_dump(exclude={"password"}, exclude_none=True)
    data["password_hash"] = await hash_password_async(payload.password)
    user = await user_service.create_user(db, data)

    await activity_service.record_activity(
        db,
        user_id=user.id,
        action="create_user",
        entity_type="user",
        entity_id=user.id,
        description=f"Registered account: {user.full_name}",
    )
    logger.info(f"User {user.id} registered successfully")
    return SignupResponse(message="User created successfully", user_id=user.id)


@router.post("/login", response_model=LoginResponse, summary="Log In")
async def login(
    request: Request,
    response: Response,
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Log in with email and password.

    Unknown email, wrong password and deactivated account all return the same
    401 so the endpoint cannot be used to discover accounts.
    """
    user = await user_service.get_user_by_email(db, payload.email)
    password_ok = await verify_password_async(
        payload.password, user.password_hash if user else None
    )

    if user is None or not password_ok or not user.is_active:
        logger.warning(
            "Failed login attempt",
            extra={"user_id": user.id if user else None},
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )

    session = await user_service.create_session(
        db,
        user,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    _set_session_cookie(response, session.session_token)

    logger.info(f"User {user.id} logged in successfully")
    return {"message": "Login successful", "user": user}


@router.post("/logout", response_model=MessageResponse, summary="Log Out")
async def logout(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Delete the server-side session (if any) and clear the cookie."""
    token = extract_session_token(request)
    if token and await user_service.delete_session(db, token):
        logger.info("Session revoked on logout")

    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logout successful"}


@router.get("/user", response_model=UserResponse, summary="Current User")
async def get_authenticated_user(
    current_user: User = Depends(require_active_user),
):
    return current_user
