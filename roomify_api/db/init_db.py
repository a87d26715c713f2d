"""
Database initialization helpers.

Models are imported so their tables get registered on Base.metadata.
"""

from sqlalchemy.engine import Engine

from roomify_api.db.session import engine as default_engine
from roomify_api.models.base import Base

from roomify_api.models import kv_entry  # noqa: F401


def init_db(engine: Engine | None = None) -> None:
    """
    Create the key-value table if it does not exist yet.
    """
    Base.metadata.create_all(bind=engine or default_engine)
