"""Task persistence boundary.

``TaskStore`` is the narrow interface the lifecycle service depends on;
``SqlTaskStore`` is the SQLModel-backed implementation used by the API.
"""

from typing import List, Optional, Protocol, runtime_checkable

from sqlmodel import Session, select

from .models import Task


@runtime_checkable
class TaskStore(Protocol):
    def insert(self, task: Task) -> int:
        """Persist a new task and return the id assigned to it."""

    def get_by_id(self, task_id: int) -> Optional[Task]:
        """Return the task or None when missing."""

    def get_all(self) -> List[Task]:
        """Return every stored task, in no particular order."""

    def replace(self, task: Task) -> None:
        """Persist changes made to an existing task."""

    def delete(self, task_id: int) -> bool:
        """Remove a task. Returns False when there was nothing to remove."""


class SqlTaskStore:
    """TaskStore over a SQLModel session; every write commits on its own."""

    def __init__(self, session: Session):
        self.session = session

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def insert(self, task: Task) -> int:
        self.session.add(task)
        self._commit()
        self.session.refresh(task)
        return task.id

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self.session.get(Task, task_id)

    def get_all(self) -> List[Task]:
        return list(self.session.exec(select(Task)).all())

    def replace(self, task: Task) -> None:
        self.session.add(task)
        self._commit()
        self.session.refresh(task)

    def delete(self, task_id: int) -> bool:
        task = self.session.get(Task, task_id)
        if task is None:
            return False
        self.session.delete(task)
        self._commit()
        return True
