# File: roomify_api/core/security.py

"""
Bearer token helpers for the projects API.

Tokens are HS256 JWTs carrying the caller's stable id in ``sub`` and a
display name in ``username``. Issuing tokens belongs to the identity
provider; ``create_access_token`` is here so the provider, scripts and
tests share one signing routine.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from roomify_api.core.config import settings


ALGORITHM = settings.algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
SECRET_KEY = settings.secret_key


def create_access_token(
    user_id: str,
    username: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    to_encode: dict[str, Any] = {"sub": user_id}
    if username is not None:
        to_encode["username"] = username
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode["exp"] = expire
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises ``jwt.InvalidTokenError`` (or a subclass such as
    ``jwt.ExpiredSignatureError``) when the token cannot be trusted.
    """
    return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
