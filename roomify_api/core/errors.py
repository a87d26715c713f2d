# File: roomify_api/core/errors.py

"""
Error taxonomy for the projects API.

Every fallible step raises ``ProjectError`` with one of the ``ErrorKind``
members. The application-level exception handler in ``roomify_api.main`` is
the only place that turns it into an HTTP response.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ProjectError(Exception):
    """
    A classified failure.

    ``error`` becomes the ``error`` field of the response body and
    ``extra`` is merged next to it, e.g.
    ``{"error": "Failed to save project", "message": "disk full"}``.
    """

    def __init__(self, kind: ErrorKind, error: str, **extra: Any):
        super().__init__(error)
        self.kind = kind
        self.message = error
        self.extra = extra

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}

    @classmethod
    def internal(cls, error: str, exc: BaseException) -> "ProjectError":
        return cls(ErrorKind.INTERNAL, error, message=str(exc) or "Unknown error")


def authentication_failed() -> ProjectError:
    return ProjectError(ErrorKind.UNAUTHORIZED, "Authentication failed")
