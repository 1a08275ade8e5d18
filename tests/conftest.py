# tests/conftest.py

import os

# Keep the app module from touching a real database file at import time.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DATABASE", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from todo_api.database import create_tables, get_db, make_engine, make_sessionmaker  # noqa: E402
from todo_api.main import app  # noqa: E402
from todo_api.routers.tasks import get_clock  # noqa: E402
from todo_api.services.tasks import TasksService  # noqa: E402

from .fakes import FakeClock, InMemoryTaskStore  # noqa: E402


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture
def service(store: InMemoryTaskStore, clock: FakeClock) -> TasksService:
    return TasksService(store, clock=clock)


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    test_engine = make_engine("sqlite://", poolclass=StaticPool)
    create_tables(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_sessionmaker(engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session, clock: FakeClock):
    """TestClient wired to the per-test database and the fake clock."""
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_clock] = lambda: clock
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
