from src.adapter.repositories.task_repository import SqlAlchemyTaskRepository
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyTaskRepository",
    "SqlAlchemyUserRepository",
]
