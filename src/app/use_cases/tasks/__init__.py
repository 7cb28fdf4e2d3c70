from src.app.use_cases.tasks.create_task_use_case import CreateTaskUseCase
from src.app.use_cases.tasks.list_tasks_use_case import ListTasksUseCase
from src.app.use_cases.tasks.search_tasks_use_case import SearchTasksUseCase
from src.app.use_cases.tasks.update_task_use_case import UpdateTaskUseCase
from src.app.use_cases.tasks.delete_task_use_case import DeleteTaskUseCase
from src.app.use_cases.tasks.dtos import (
    CreateTaskRequest,
    CreateTaskCommand,
    CreateTaskResponse,
    ListTasksCommand,
    SearchTasksCommand,
    UpdateTaskRequest,
    UpdateTaskCommand,
    DeleteTaskResponse,
    TaskDTO,
)

__all__ = [
    "CreateTaskUseCase",
    "ListTasksUseCase",
    "SearchTasksUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "CreateTaskRequest",
    "CreateTaskCommand",
    "CreateTaskResponse",
    "ListTasksCommand",
    "SearchTasksCommand",
    "UpdateTaskRequest",
    "UpdateTaskCommand",
    "DeleteTaskResponse",
    "TaskDTO",
]
