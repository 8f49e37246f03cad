"""
Tests for core security utilities.

Tests:
- Password hashing and verification
- Timing-equalizing dummy checks for unknown accounts
- Session token generation
"""

import pytest
from unittest.mock import patch

from core.security import (
    burn_password_check,
    generate_session_token,
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)


class TestPasswordHashing:
    """Test password hashing and verification."""

    def test_hash_password(self):
        """Test password hashing."""
        password = "SecurePassword123!"
        hashed = hash_password(password)

        assert isinstance(hashed, str)
        assert hashed != password
        assert hashed.startswith("$2b$")  # bcrypt format

    def test_hash_password_uses_configured_rounds(self):
        """Tests run with BCRYPT_ROUNDS=4."""
        assert hash_password("whatever").startswith("$2b$04$")

    def test_hash_password_different_each_time(self):
        """Test that hashing same password produces different hashes."""
        password = "SecurePassword123!"
        assert hash_password(password) != hash_password(password)

    def test_verify_password_success(self):
        hashed = hash_password("SecurePassword123!")
        assert verify_password("SecurePassword123!", hashed) is True

    def test_verify_password_failure(self):
        hashed = hash_password("SecurePassword123!")
        assert verify_password("WrongPassword123!", hashed) is False

    def test_verify_password_empty(self):
        hashed = hash_password("SecurePassword123!")
        assert verify_password("", hashed) is False

    def test_verify_password_malformed_hash(self):
        """A corrupt stored hash fails closed instead of raising."""
        assert verify_password("SecurePassword123!", "not-a-bcrypt-hash") is False

    def test_long_password_truncated_consistently(self):
        """bcrypt ignores bytes past 72; hashing must not raise on long input."""
        password = "x" * 100
        hashed = hash_password(password)
        assert verify_password(password, hashed) is True


class TestUnknownAccountChecks:
    """Unknown emails must cost the same bcrypt work as a wrong password."""

    def test_burn_password_check_always_fails(self):
        assert burn_password_check("anything") is False

    def test_burn_password_check_runs_bcrypt(self):
        with patch("core.security.verify_password", return_value=True) as mock_verify:
            assert burn_password_check("anything") is False
        mock_verify.assert_called_once()

    @pytest.mark.asyncio
    async def test_verify_password_async_without_hash(self):
        assert await verify_password_async("anything", None) is False

    @pytest.mark.asyncio
    async def test_async_round_trip(self):
        hashed = await hash_password_async("SecurePassword123!")
        assert await verify_password_async("SecurePassword123!", hashed) is True
        assert await verify_password_async("nope", hashed) is False


class TestSessionTokens:
    def test_generate_session_token(self):
        token = generate_session_token()
        assert isinstance(token, str)
        assert len(token) >= 43  # 32 bytes, base64url

    def test_generate_session_token_unique(self):
        tokens = {generate_session_token() for _ in range(100)}
        assert len(tokens) == 100
