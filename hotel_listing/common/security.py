"""
Security Primitives

Password hashing (argon2), HS256 JWT encoding/decoding and opaque token generation.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
from datetime import datetime, timedelta
from typing import Any, Optional

import argon2
import jwt
from argon2.exceptions import InvalidHashError, VerificationError

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"

_hasher = argon2.PasswordHasher()

# Verified against when the user does not exist, so that unknown-user and
# wrong-password logins take the same time.
_dummy_hash: Optional[str] = None


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


async def hash_password_async(password: str) -> str:
    """Hash off the event loop; argon2 is CPU bound."""
    return await asyncio.to_thread(hash_password, password)


async def verify_password_async(password: str, password_hash: Optional[str]) -> bool:
    """
    Verify off the event loop.

    A missing hash still runs a full verification against a dummy hash and returns False.
    """
    global _dummy_hash
    if password_hash is None:
        if _dummy_hash is None:
            _dummy_hash = hash_password(secrets.token_urlsafe(16))
        await asyncio.to_thread(verify_password, password, _dummy_hash)
        return False
    return await asyncio.to_thread(verify_password, password, password_hash)


def generate_opaque_token(nbytes: int = 32) -> str:
    """Random URL-safe token value (refresh tokens, security stamps)."""
    return secrets.token_urlsafe(nbytes)


def encode_jwt(
    claims: dict[str, Any],
    *,
    key: str,
    issuer: str,
    audience: str,
    expires_at: datetime,
) -> str:
    payload = dict(claims)
    payload.update({"iss": issuer, "aud": audience, "exp": expires_at})
    return jwt.encode(payload, key, algorithm=JWT_ALGORITHM)


def decode_jwt(token: str, *, key: str, issuer: str, audience: str) -> dict[str, Any]:
    """
    Decode and fully validate a JWT: signature, expiry, issuer and audience, zero leeway.

    Raises:
        jwt.PyJWTError: Token rejected
    """
    return jwt.decode(
        token,
        key,
        algorithms=[JWT_ALGORITHM],
        audience=audience,
        issuer=issuer,
        leeway=timedelta(0),
        options={"require": ["exp", "iss", "aud", "sub"]},
    )


def read_jwt_unverified(token: str) -> Optional[dict[str, Any]]:
    """
    Read JWT claims without checking signature or lifetime.

    Used only to identify which user an expired access token belonged to.
    Returns None when the token is not a well-formed JWT.
    """
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        logger.debug("Unreadable access token: %s", e)
        return None
