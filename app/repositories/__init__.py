from .memory import InMemoryTaskRepository
from .sql import SqlTaskRepository
from .task_repository import TaskRepository

__all__ = ["InMemoryTaskRepository", "SqlTaskRepository", "TaskRepository"]
