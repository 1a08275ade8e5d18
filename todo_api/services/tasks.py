import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from ..exceptions import NotFoundError
from ..models import Task
from ..store import TaskStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def sort_tasks(tasks: Iterable[Task]) -> List[Task]:
    """Active tasks oldest first, then completed tasks most recently finished first."""
    tasks = list(tasks)
    active = sorted(
        (t for t in tasks if not t.is_completed),
        key=lambda t: (t.created_at, t.id),
    )
    completed = sorted(
        (t for t in tasks if t.is_completed),
        key=lambda t: (t.completed_at or _EPOCH, t.id),
        reverse=True,
    )
    return active + completed


class TasksService:
    """Task lifecycle rules on top of a TaskStore.

    Errors from the store are never caught here; the HTTP layer decides how
    they are reported.
    """

    def __init__(self, store: TaskStore, clock: Clock = utcnow):
        self.store = store
        self.clock = clock

    def list_tasks(self) -> List[Task]:
        return sort_tasks(self.store.get_all())

    def get_task(self, task_id: int) -> Task:
        task = self.store.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)
        return task

    def create_task(self, title: str) -> Task:
        now = self.clock()
        task = Task(
            title=title.strip(),
            is_completed=False,
            created_at=now,
            updated_at=now,
            completed_at=None,
        )
        task.id = self.store.insert(task)
        logger.info("Created task id=%s", task.id)
        return task

    def update_task(
        self,
        task_id: int,
        title: Optional[str] = None,
        is_completed: Optional[bool] = None,
    ) -> Task:
        """Apply a partial update.

        Only fields that actually change mark the task dirty. A clean task is
        returned as-is: no write, and ``updated_at`` stays where it was.
        """
        task = self.store.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)

        now = self.clock()
        dirty = False

        if title is not None and title.strip():
            trimmed = title.strip()
            if trimmed != task.title:
                task.title = trimmed
                dirty = True

        if is_completed is not None and is_completed != task.is_completed:
            task.is_completed = is_completed
            task.completed_at = now if is_completed else None
            dirty = True

        if not dirty:
            logger.debug("Update of task id=%s changed nothing", task_id)
            return task

        task.updated_at = now
        self.store.replace(task)
        logger.info("Updated task id=%s completed=%s", task_id, task.is_completed)
        return task

    def delete_task(self, task_id: int) -> bool:
        deleted = self.store.delete(task_id)
        if deleted:
            logger.info("Deleted task id=%s", task_id)
        else:
            logger.debug("Delete of task id=%s found nothing", task_id)
        return deleted
