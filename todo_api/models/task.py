from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional

TITLE_MAX_LENGTH = 100


class Task(SQLModel, table=True):
    """Task model for todo items.

    Timestamps are timezone-aware UTC values. ``completed_at`` is set exactly when
    ``is_completed`` is true.
    """
    __tablename__ = "tasks"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    is_completed: bool = Field(default=False, sa_column_kwargs={"server_default": "0"})
    created_at: datetime = Field(index=True)
    updated_at: datetime
    completed_at: Optional[datetime] = Field(default=None, index=True)
