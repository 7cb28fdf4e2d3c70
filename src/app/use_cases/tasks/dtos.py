from typing import Optional
from pydantic import BaseModel
from src.app.services.pagination import DEFAULT_PAGE_SIZE
from src.domain.enums import TaskPriority, TaskStatus


class CreateTaskRequest(BaseModel):
    """Request DTO for creating a task (API layer - from user input)"""

    title: str
    description: str = ""
    priority: str
    status: str


class CreateTaskCommand(BaseModel):
    """Command DTO for creating a task (Use case layer)"""

    owner_id: int  # Resolved caller, never taken from the payload
    title: str
    description: str = ""
    priority: str
    status: str


class CreateTaskResponse(BaseModel):
    """Response DTO for CreateTaskUseCase"""

    id: int


class ListTasksCommand(BaseModel):
    """Command DTO for listing the caller's tasks with optional filters"""

    owner_id: int
    priority: Optional[str] = None  # Compared verbatim, not validated
    status: Optional[str] = None
    page_size: int = DEFAULT_PAGE_SIZE
    page_number: int = 0


class SearchTasksCommand(BaseModel):
    """Command DTO for free-text search over the caller's tasks"""

    owner_id: int
    search: Optional[str] = None
    page_size: int = DEFAULT_PAGE_SIZE
    page_number: int = 0


class UpdateTaskRequest(BaseModel):
    """Request DTO for replacing a task's content (API layer)"""

    title: str
    description: str = ""
    priority: str
    status: str


class UpdateTaskCommand(BaseModel):
    """Command DTO for updating a task (Use case layer)"""

    owner_id: int
    task_id: int
    title: str
    description: str = ""
    priority: str
    status: str


class DeleteTaskResponse(BaseModel):
    """Response DTO for DeleteTaskUseCase"""

    deleted: bool


class TaskDTO(BaseModel):
    """Transfer shape of a task; the owner reference is never exposed"""

    id: int
    title: str
    description: str = ""
    priority: TaskPriority
    status: TaskStatus

    @classmethod
    def from_entity(cls, task) -> "TaskDTO":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            priority=TaskPriority(task.priority),
            status=TaskStatus(task.status),
        )
