"""Tests for session token resolution."""

from datetime import timedelta
from unittest.mock import Mock

import pytest

from api.services import users as user_service
from core.middleware.authentication import (
    SessionInvalidError,
    SessionMissingError,
    UserInactiveError,
    extract_session_token,
    resolve_session_user,
)
from core.security import hash_password
from core.utils.datetime import now
from database.models import UserSession


async def _make_user(db_session, email="staff@example.com", **extra):
    data = {
        "email": email,
        "password_hash": hash_password("Sup3rSecret!"),
        "first_name": "Sam",
        "last_name": "Staff",
    }
    data.update(extra)
    return await user_service.create_user(db_session, data)


class TestExtractSessionToken:
    def test_reads_cookie(self):
        request = Mock()
        request.cookies = {"hr_session": "abc"}
        assert extract_session_token(request) == "abc"

    def test_missing_or_empty_cookie(self):
        request = Mock()
        request.cookies = {"hr_session": ""}
        assert extract_session_token(request) is None
        request.cookies = {}
        assert extract_session_token(request) is None


class TestResolveSessionUser:
    async def test_valid_session(self, db_session):
        user = await _make_user(db_session)
        session = await user_service.create_session(db_session, user)

        resolved = await resolve_session_user(db_session, session.session_token)
        assert resolved.id == user.id

    async def test_missing_token(self, db_session):
        with pytest.raises(SessionMissingError):
            await resolve_session_user(db_session, None)

    async def test_unknown_token(self, db_session):
        with pytest.raises(SessionInvalidError):
            await resolve_session_user(db_session, "not-a-session")

    async def test_expired_session(self, db_session):
        user = await _make_user(db_session)
        db_session.add(
            UserSession(
                session_token="expired-token",
                user_id=user.id,
                expires_at=now() - timedelta(minutes=1),
            )
        )
        await db_session.commit()

        with pytest.raises(SessionInvalidError):
            await resolve_session_user(db_session, "expired-token")

    async def test_inactive_user(self, db_session):
        user = await _make_user(db_session)
        session = await user_service.create_session(db_session, user)
        await user_service.update_user(db_session, user.id, {"is_active": False})

        with pytest.raises(UserInactiveError):
            await resolve_session_user(db_session, session.session_token)

    async def test_deleted_session(self, db_session):
        user = await _make_user(db_session)
        session = await user_service.create_session(db_session, user)

        assert await user_service.delete_session(db_session, session.session_token) is True
        assert await user_service.delete_session(db_session, session.session_token) is False
        with pytest.raises(SessionInvalidError):
            await resolve_session_user(db_session, session.session_token)
