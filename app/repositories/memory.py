import logging
import threading
from typing import Dict, List, Optional

from ..models import Task

logger = logging.getLogger(__name__)


class InMemoryTaskRepository:
    """Process-local task store. Ids start at 1 and are never reused.

    Stored rows are plain dicts; every read builds a fresh ``Task`` so callers
    only change stored state through ``save``.
    """

    def __init__(self):
        self._rows: Dict[int, dict] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def find_all(self) -> List[Task]:
        with self._lock:
            return [Task(**row) for _, row in sorted(self._rows.items())]

    def find_by_id(self, task_id: int) -> Optional[Task]:
        with self._lock:
            row = self._rows.get(task_id)
        return Task(**row) if row is not None else None

    def save(self, task: Task) -> Task:
        row = task.model_dump()
        with self._lock:
            if row["id"] is None:
                self._last_id += 1
                row["id"] = self._last_id
            else:
                self._last_id = max(self._last_id, row["id"])
            self._rows[row["id"]] = row
        logger.debug("Saved task id=%s", row["id"])
        return Task(**row)

    def delete_by_id(self, task_id: int) -> None:
        with self._lock:
            removed = self._rows.pop(task_id, None)
        if removed is None:
            logger.debug("Delete of missing task id=%s ignored", task_id)
