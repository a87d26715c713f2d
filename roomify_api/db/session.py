# File: roomify_api/db/session.py

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from roomify_api.core.config import settings


def create_db_engine(url: str, **kwargs) -> Engine:
    """
    Engine for the key-value table.

    SQLite connections are handed across FastAPI's threadpool workers, so
    the same-thread check is switched off for them.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


engine = create_db_engine(settings.database_url)
SessionLocal = make_session_factory(engine)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency yielding one session per request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
