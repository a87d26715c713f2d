# File: roomify_api/services/identity.py

"""
Caller identity.

``AuthClient`` is the authentication capability for one request: it turns
the ``Authorization`` header into an ``AuthUser`` or raises.
``resolve_identity`` wraps it and fails closed.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from roomify_api.core.security import decode_access_token

logger = logging.getLogger(__name__)

UNKNOWN_USERNAME = "Unknown"


class AuthenticationError(Exception):
    pass


@dataclass(frozen=True)
class AuthUser:
    uuid: Optional[str]
    username: Optional[str] = None


@dataclass(frozen=True)
class Identity:
    user_id: str
    display_name: str


class AuthClient:
    def __init__(self, authorization: Optional[str]):
        self.authorization = authorization

    def _bearer_token(self) -> str:
        if not self.authorization:
            raise AuthenticationError("Missing authorization token")

        # "Bearer <token>"
        parts = self.authorization.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise AuthenticationError(
                "Invalid authorization header format. Use 'Bearer <token>'"
            )
        return parts[1]

    def get_user(self) -> AuthUser:
        claims = decode_access_token(self._bearer_token())
        return AuthUser(uuid=claims.get("sub"), username=claims.get("username"))


def resolve_identity(session: Optional[AuthClient]) -> Optional[Identity]:
    """
    Resolve the caller's stable id, or None when it cannot be established.

    Any failure from the authentication capability (raised error, missing or
    empty uuid) yields None. Nothing is retried.
    """
    if session is None:
        return None
    try:
        user = session.get_user()
    except Exception as exc:
        logger.debug("Identity resolution failed: %s", exc)
        return None

    if not user.uuid:
        logger.debug("Identity resolution failed: token has no subject")
        return None
    return Identity(user_id=user.uuid, display_name=user.username or UNKNOWN_USERNAME)
