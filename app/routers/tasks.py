import logging
from typing import List

from fastapi import APIRouter, HTTPException, Response, status

from ..models import Task as TaskModel
from ..repositories import TaskRepository
from ..schemas.task import Task as TaskSchema, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


def create_tasks_router(repository: TaskRepository) -> APIRouter:
    """Build the /tasks routes around an explicit task store."""
    router = APIRouter()

    @router.get("/tasks", response_model=List[TaskSchema])
    def get_tasks():
        """List every task."""
        return repository.find_all()

    @router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
    def create_task(task: TaskCreate):
        """Create a new task. The store assigns the id."""
        db_task = TaskModel(
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            completed=task.completed,
        )
        db_task = repository.save(db_task)
        logger.info("Created task id=%s", db_task.id)
        return db_task

    @router.put("/tasks/{task_id}", response_model=TaskSchema)
    def update_task(task_id: int, task_update: TaskUpdate):
        """Replace all mutable fields of a task."""
        task = repository.find_by_id(task_id)
        if task is None:
            raise HTTPException(status_code=404, detail="Task not found")

        task.title = task_update.title
        task.description = task_update.description
        task.due_date = task_update.due_date
        task.completed = task_update.completed

        task = repository.save(task)
        logger.info("Updated task id=%s", task.id)
        return task

    @router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_task(task_id: int):
        """Delete a task. Missing ids are not an error."""
        repository.delete_by_id(task_id)
        logger.info("Deleted task id=%s", task_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
