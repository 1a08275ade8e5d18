from datetime import datetime, timezone

from todo_api.database import seed_tasks
from todo_api.services.tasks import TasksService
from todo_api.store import SqlTaskStore

NOW = datetime(2026, 5, 4, 10, 0, tzinfo=timezone.utc)


def test_seed_fills_empty_table_once(db_session):
    assert seed_tasks(db_session, NOW) == 5
    assert seed_tasks(db_session, NOW) == 0
    assert len(SqlTaskStore(db_session).get_all()) == 5


def test_seeded_tasks_keep_completion_invariant(db_session):
    seed_tasks(db_session, NOW)

    for task in SqlTaskStore(db_session).get_all():
        assert task.is_completed == (task.completed_at is not None)
        assert task.updated_at >= task.created_at


def test_seeded_tasks_list_in_display_order(db_session):
    seed_tasks(db_session, NOW)

    titles = [t.title for t in TasksService(SqlTaskStore(db_session)).list_tasks()]

    assert titles == [
        "Explore UI/UX",
        "Review front-end design",
        "Review back-end design",
        "Prepare job offer",
        "Start task management application",
    ]
