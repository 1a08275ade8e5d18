from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

import todo_api.main as main_module
from todo_api.database import create_tables, get_db, make_engine, make_sessionmaker
from todo_api.main import app


@pytest.fixture
def fresh_engine():
    """Empty in-memory database with no tables yet."""
    engine = make_engine("sqlite://", poolclass=StaticPool)
    yield engine
    engine.dispose()


@pytest.fixture
def wire_startup(monkeypatch, fresh_engine):
    """Point the startup hook and the request sessions at ``fresh_engine``."""
    factory = make_sessionmaker(fresh_engine)

    @contextmanager
    def session_scope():
        session = factory()
        try:
            yield session
        finally:
            session.close()

    def override_get_db():
        with session_scope() as session:
            yield session

    monkeypatch.setattr(main_module, "create_tables", lambda: create_tables(fresh_engine))
    monkeypatch.setattr(main_module, "get_session", session_scope)
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield monkeypatch
    finally:
        app.dependency_overrides.clear()


def test_startup_creates_tables_and_seeds(wire_startup, fresh_engine):
    wire_startup.setattr(main_module, "SEED_DATABASE", True)

    with TestClient(app) as client:
        tasks = client.get("/api/tasks").json()

    assert "tasks" in inspect(fresh_engine).get_table_names()
    assert [t["title"] for t in tasks] == [
        "Explore UI/UX",
        "Review front-end design",
        "Review back-end design",
        "Prepare job offer",
        "Start task management application",
    ]
    assert "completedAt" in tasks[-1]


def test_startup_without_seeding_leaves_table_empty(wire_startup, fresh_engine):
    wire_startup.setattr(main_module, "SEED_DATABASE", False)

    with TestClient(app) as client:
        assert client.get("/api/tasks").json() == []

    assert "tasks" in inspect(fresh_engine).get_table_names()
