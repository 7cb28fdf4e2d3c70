from datetime import datetime
from typing import Optional
from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlmodel import Field
from src.domain.base import BaseModel, utc_now
from src.domain.enums import TaskPriority, TaskStatus

MAX_TITLE_LENGTH = 255


class Task(BaseModel, table=True):
    __tablename__ = "task"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=MAX_TITLE_LENGTH, nullable=False)
    description: str = Field(default="", nullable=False)
    priority: str = Field(max_length=32, nullable=False, index=True)
    status: str = Field(max_length=32, nullable=False, index=True)
    owner_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("task_user.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    updated_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )

    def replace_content(
        self, title: str, description: str, priority: TaskPriority, status: TaskStatus
    ) -> None:
        """Overwrite every mutable field; owner and id are left untouched"""
        self.title = title
        self.description = description
        self.priority = priority.value
        self.status = status.value
        self.updated_at = utc_now()
