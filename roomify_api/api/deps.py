# File: roomify_api/api/deps.py

from typing import Optional

from fastapi import Depends, Header

from roomify_api.db.session import get_db
from roomify_api.services.identity import AuthClient, Identity, resolve_identity

__all__ = ["get_db", "get_auth_client", "get_identity"]


def get_auth_client(authorization: Optional[str] = Header(None)) -> AuthClient:
    """
    FastAPI dependency that wraps the request's Authorization header.
    """
    return AuthClient(authorization)


def get_identity(session: AuthClient = Depends(get_auth_client)) -> Optional[Identity]:
    """
    Resolved caller, or None when unauthenticated.

    Never raises: route functions decide when to reject with 401 so that
    body validation can run first.
    """
    return resolve_identity(session)
