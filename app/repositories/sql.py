import logging
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import select

from ..database import get_session
from ..models import Task

logger = logging.getLogger(__name__)


class SqlTaskRepository:
    """Task store backed by a SQLModel table.

    Each call runs in its own session, so one instance can be shared by all
    request threads; the engine's pool hands out the connections.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def find_all(self) -> List[Task]:
        with get_session(self.engine) as session:
            return session.exec(select(Task).order_by(Task.id)).all()

    def find_by_id(self, task_id: int) -> Optional[Task]:
        with get_session(self.engine) as session:
            return session.get(Task, task_id)

    def save(self, task: Task) -> Task:
        with get_session(self.engine) as session:
            if task.id is None:
                session.add(task)
            else:
                task = session.merge(task)
            session.commit()
            session.refresh(task)
            logger.debug("Saved task id=%s", task.id)
            return task

    def delete_by_id(self, task_id: int) -> None:
        with get_session(self.engine) as session:
            task = session.get(Task, task_id)
            if task is None:
                logger.debug("Delete of missing task id=%s ignored", task_id)
                return
            session.delete(task)
            session.commit()
            logger.debug("Deleted task id=%s", task_id)
