# File: roomify_api/models/kv_entry.py

"""
KVEntry model.

One row per (scope, key). ``scope`` is the caller's user id for private
records, or the shared public scope; ``value`` holds the project JSON.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from roomify_api.models.base import Base


class KVEntry(Base):
    __tablename__ = "kv_entries"

    scope: Mapped[str] = mapped_column(String(255), primary_key=True)
    key: Mapped[str] = mapped_column(String(512), primary_key=True)
    value: Mapped[dict[str, Any]] = mapped_column(nullable=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
