"""
Security utilities: password hashing and session tokens.

bcrypt is CPU-bound; request handlers should use the ``*_async`` variants so
the event loop is not blocked while a hash is computed.
"""

import functools
import logging
import secrets

import bcrypt
from starlette.concurrency import run_in_threadpool

from core.config import settings

logger = logging.getLogger("security")

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt using the configured cost factor."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Constant-time check of a password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        # malformed hash stored for this user
        logger.warning("Password verification failed: invalid hash format")
        return False


@functools.lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password(secrets.token_urlsafe(16))


def burn_password_check(password: str) -> bool:
    """
    Spend the same bcrypt work as a real verification and fail.

    Used when the account does not exist so response timing does not
    reveal which emails are registered.
    """
    verify_password(password, _dummy_hash())
    return False


async def hash_password_async(password: str) -> str:
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(password: str, hashed: str | None) -> bool:
    if hashed is None:
        return await run_in_threadpool(burn_password_check, password)
    return await run_in_threadpool(verify_password, password, hashed)


def generate_session_token() -> str:
    """Opaque, URL-safe session identifier (256 bits of entropy)."""
    return secrets.token_urlsafe(32)
