# File: tests/conftest.py

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from roomify_api.core.security import create_access_token
from roomify_api.db.init_db import init_db
from roomify_api.db.session import create_db_engine, get_db, make_session_factory
from roomify_api.main import app
from roomify_api.services.identity import Identity
from roomify_api.services.project_store import ProjectStore


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSessionLocal = make_session_factory(engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice():
    return Identity(user_id="user-a", display_name="alice")


@pytest.fixture
def bob():
    return Identity(user_id="user-b", display_name="bob")


@pytest.fixture
def store_for(db):
    def _store(identity):
        return ProjectStore.for_user(db, identity.user_id)
    return _store


@pytest.fixture
def auth_headers():
    def _headers(user_id, username=None):
        return {"Authorization": f"Bearer {create_access_token(user_id, username)}"}
    return _headers
