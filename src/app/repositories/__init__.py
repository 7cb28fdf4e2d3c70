from src.app.repositories.task_repository import TaskRepository
from src.app.repositories.user_repository import UserRepository

__all__ = [
    "TaskRepository",
    "UserRepository",
]
