from datetime import date
from typing import Optional

from sqlmodel import SQLModel, Field


class Task(SQLModel, table=True):
    """Task model for study organizer items."""
    __tablename__ = "tasks"
    # ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    completed: bool = Field(default=False)
