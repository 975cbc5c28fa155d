"""Session token creation and verification.

Saving, listing, favoriting and sharing routes require a signed-in user.
Tokens are HS256 JWTs carrying the user id in the 'sub' claim.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Header
from jose import JWTError, jwt

from app.config import settings
from app.services.route.errors import AuthenticationError

logger = logging.getLogger(__name__)


def create_access_token(user_id: str) -> str:
    if not user_id:
        raise ValueError("user_id cannot be empty")

    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(days=settings.auth_token_expire_days),
    }
    return jwt.encode(payload, settings.auth_secret_key, algorithm=settings.auth_algorithm)


def decode_access_token(token: str) -> str:
    """Verify a session token and return its user id.

    Raises:
        AuthenticationError: token is malformed, expired or has no subject
    """
    try:
        payload = jwt.decode(
            token, settings.auth_secret_key, algorithms=[settings.auth_algorithm]
        )
    except JWTError as exc:
        logger.warning("Session token rejected: %s", exc)
        raise AuthenticationError("Invalid or expired session") from exc

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Session token missing user id")
    return str(user_id)


async def get_current_user_id(authorization: Optional[str] = Header(default=None)) -> str:
    """FastAPI dependency resolving the signed-in user from the Authorization header."""
    if not authorization:
        raise AuthenticationError("Sign in to manage saved routes")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Authorization header must be 'Bearer <token>'")
    return decode_access_token(token.strip())
