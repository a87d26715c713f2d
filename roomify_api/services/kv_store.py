# File: roomify_api/services/kv_store.py

"""
Key-value adapter backed by the ``kv_entries`` table.

Each instance is bound to one scope (a user id, or the shared public
scope). Writes commit immediately, so a ``set`` is durable before any
following ``delete`` is issued.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from roomify_api.models.kv_entry import KVEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyValue:
    key: str
    value: Any


def _escape_like(prefix: str) -> str:
    return prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlKeyValueStore:
    def __init__(self, db: Session, scope: str):
        self.db = db
        self.scope = scope

    def _entry(self, key: str) -> Optional[KVEntry]:
        return self.db.get(KVEntry, (self.scope, key))

    def get(self, key: str) -> Any:
        entry = self._entry(key)
        return entry.value if entry is not None else None

    def set(self, key: str, value: Any) -> None:
        entry = self._entry(key)
        if entry is None:
            self.db.add(KVEntry(scope=self.scope, key=key, value=value))
        else:
            entry.value = value
        self.db.commit()
        logger.debug("kv set scope=%s key=%s", self.scope, key)

    def delete(self, key: str) -> None:
        entry = self._entry(key)
        if entry is None:
            return
        self.db.delete(entry)
        self.db.commit()
        logger.debug("kv delete scope=%s key=%s", self.scope, key)

    def list(self, prefix: str) -> list[KeyValue]:
        stmt = (
            select(KVEntry)
            .where(KVEntry.scope == self.scope)
            .where(KVEntry.key.like(f"{_escape_like(prefix)}%", escape="\\"))
            .order_by(KVEntry.key)
        )
        return [KeyValue(key=e.key, value=e.value) for e in self.db.scalars(stmt)]
