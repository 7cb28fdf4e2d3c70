from abc import ABC, abstractmethod
from typing import Optional, List
from src.app.services.pagination import PageRequest
from src.app.services.task_predicate_builder import TaskPredicate
from src.domain import Task


class TaskRepository(ABC):
    """Repository interface for Task entity"""

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Create a new task"""
        pass

    @abstractmethod
    async def find_one(self, predicate: TaskPredicate) -> Optional[Task]:
        """Get the first task matching the predicate"""
        pass

    @abstractmethod
    async def find_page(self, predicate: TaskPredicate, page: PageRequest) -> List[Task]:
        """Get one page of tasks matching the predicate, ordered by id"""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update an existing task"""
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Delete a task; raises StaleDataError if the row is already gone"""
        pass

    @abstractmethod
    async def delete_by_owner(self, owner_id: int) -> int:
        """Delete every task owned by a user, returning the number removed"""
        pass
