# File: roomify_api/services/project_store.py

"""
Project storage on top of the key-value adapter.

Two logical namespaces share the store and are told apart by key prefix:

  - PRIVATE: ``<private_prefix><id>`` in the caller's own scope
  - PUBLIC:  ``<public_prefix><id>`` in the shared public scope, so every
    caller can list shared projects and the owner check on unshare can see
    them
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from sqlalchemy.orm import Session

from roomify_api.core.config import settings
from roomify_api.services.kv_store import SqlKeyValueStore

Project = dict[str, Any]


class Namespace(str, Enum):
    PRIVATE = "private"
    PUBLIC = "public"


def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ProjectStore:
    def __init__(self, private_kv: SqlKeyValueStore, public_kv: SqlKeyValueStore):
        self._kv = {
            Namespace.PRIVATE: private_kv,
            Namespace.PUBLIC: public_kv,
        }
        self._prefix = {
            Namespace.PRIVATE: settings.private_prefix,
            Namespace.PUBLIC: settings.public_prefix,
        }

    @classmethod
    def for_user(cls, db: Session, user_id: str) -> "ProjectStore":
        return cls(
            private_kv=SqlKeyValueStore(db, scope=user_id),
            public_kv=SqlKeyValueStore(db, scope=settings.public_scope),
        )

    def key(self, ns: Namespace, project_id: str) -> str:
        return f"{self._prefix[ns]}{project_id}"

    def save(self, ns: Namespace, project_id: str, value: Project) -> Project:
        """Upsert ``value`` under ``project_id``; refreshes ``updatedAt`` and returns the stored record."""
        payload = {**value, "updatedAt": utc_now_iso()}
        self._kv[ns].set(self.key(ns, project_id), payload)
        return payload

    def load(self, ns: Namespace, project_id: str) -> Optional[Project]:
        return self._kv[ns].get(self.key(ns, project_id))

    def list_all(self, ns: Namespace) -> list[Project]:
        entries = self._kv[ns].list(self._prefix[ns])
        if ns is Namespace.PUBLIC:
            return [{**entry.value, "isPublic": True} for entry in entries]
        return [entry.value for entry in entries]

    def remove(self, ns: Namespace, project_id: str) -> None:
        self._kv[ns].delete(self.key(ns, project_id))
