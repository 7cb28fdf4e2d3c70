from src.domain.base import BaseModel
from src.domain.enums import TaskPriority, TaskStatus
from src.domain.user import User, DEFAULT_USER_NAME
from src.domain.task import Task, MAX_TITLE_LENGTH

__all__ = [
    # Base
    "BaseModel",
    # Enums
    "TaskPriority",
    "TaskStatus",
    # Entities
    "User",
    "DEFAULT_USER_NAME",
    "Task",
    "MAX_TITLE_LENGTH",
]
