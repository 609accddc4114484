from typing import List, Optional, Protocol, runtime_checkable

from ..models import Task


@runtime_checkable
class TaskRepository(Protocol):
    """Record store for tasks keyed by an auto-assigned integer id."""

    def find_all(self) -> List[Task]:
        """Return every stored task, oldest first."""

    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Return the task with ``task_id`` or None when missing."""

    def save(self, task: Task) -> Task:
        """Insert when ``task.id`` is None, otherwise overwrite (upsert) by id."""

    def delete_by_id(self, task_id: int) -> None:
        """Remove the task with ``task_id``; missing ids are ignored."""
