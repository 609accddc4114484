from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskBase(BaseModel):
    """Base task schema with the four mutable fields.

    ``due_date`` travels as ``dueDate`` on the wire; the snake_case name is
    accepted on input as well.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = Field(default=None, alias="dueDate")
    completed: bool = False

    @field_validator("completed", mode="before")
    @classmethod
    def _null_completed_is_false(cls, value):
        return False if value is None else value


class TaskCreate(TaskBase):
    """Schema for creating new tasks. Any client ``id`` is dropped."""
    pass


class TaskUpdate(TaskBase):
    """Schema for replacing a task. Omitted fields reset to their defaults."""
    pass


class Task(TaskBase):
    """Complete task schema with all fields."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
