from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError, client_error_for
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.services.task_field_validator import TaskFieldValidator
from src.app.services.task_predicate_builder import TaskPredicateBuilder
from src.depends import (
    get_unit_of_work,
    get_audit_service,
    get_task_field_validator,
    get_task_predicate_builder,
    get_caller_id,
)
from src.app.use_cases.tasks import (
    CreateTaskUseCase,
    CreateTaskRequest,
    CreateTaskCommand,
    CreateTaskResponse,
    ListTasksUseCase,
    ListTasksCommand,
    SearchTasksUseCase,
    SearchTasksCommand,
    UpdateTaskUseCase,
    UpdateTaskRequest,
    UpdateTaskCommand,
    DeleteTaskUseCase,
    DeleteTaskResponse,
    TaskDTO,
)

router = APIRouter()


@router.post("/tasks", response_model=CreateTaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskRequest,
    caller_id: int = Depends(get_caller_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
    field_validator: TaskFieldValidator = Depends(get_task_field_validator),
):
    """Create a task owned by the caller"""
    command = CreateTaskCommand(
        owner_id=caller_id,
        title=request.title,
        description=request.description,
        priority=request.priority,
        status=request.status,
    )

    use_case = CreateTaskUseCase(uow, audit_service, field_validator)
    result = await use_case.execute(command)

    if result.is_err():
        raise client_error_for(result.error)

    return result.value


@router.get("/tasks", response_model=List[TaskDTO], status_code=status.HTTP_200_OK)
async def list_tasks(
    caller_id: int = Depends(get_caller_id),
    priority: Optional[str] = Query(None, description="Exact stored priority, e.g. HIGH"),
    status_filter: Optional[str] = Query(None, alias="status", description="Exact stored status"),
    page_size: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, alias="pageSize"),
    page_number: int = Query(0, alias="pageNumber", description="Zero-based page index"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    predicate_builder: TaskPredicateBuilder = Depends(get_task_predicate_builder),
):
    """List the caller's tasks, optionally filtered by priority and status"""
    command = ListTasksCommand(
        owner_id=caller_id,
        priority=priority,
        status=status_filter,
        page_size=page_size,
        page_number=page_number,
    )

    use_case = ListTasksUseCase(uow, predicate_builder, ApplicationConfig.MAX_PAGE_SIZE)
    result = await use_case.execute(command)

    # Listing never fails on filter input; bad values give an empty page
    return result.value_or([])


@router.get("/tasks/search", response_model=List[TaskDTO], status_code=status.HTTP_200_OK)
async def search_tasks(
    caller_id: int = Depends(get_caller_id),
    search: Optional[str] = Query(None, description="Substring of title or description"),
    page_size: int = Query(ApplicationConfig.DEFAULT_PAGE_SIZE, alias="pageSize"),
    page_number: int = Query(0, alias="pageNumber"),
    uow: UnitOfWork = Depends(get_unit_of_work),
    predicate_builder: TaskPredicateBuilder = Depends(get_task_predicate_builder),
):
    """Search the caller's tasks by title or description"""
    command = SearchTasksCommand(
        owner_id=caller_id, search=search, page_size=page_size, page_number=page_number
    )

    use_case = SearchTasksUseCase(uow, predicate_builder, ApplicationConfig.MAX_PAGE_SIZE)
    result = await use_case.execute(command)

    return result.value_or([])


@router.put("/tasks/{task_id}", response_model=TaskDTO, status_code=status.HTTP_200_OK)
async def update_task(
    task_id: int,
    request: UpdateTaskRequest,
    caller_id: int = Depends(get_caller_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
    field_validator: TaskFieldValidator = Depends(get_task_field_validator),
    predicate_builder: TaskPredicateBuilder = Depends(get_task_predicate_builder),
):
    """Replace every field of one of the caller's tasks"""
    command = UpdateTaskCommand(
        owner_id=caller_id,
        task_id=task_id,
        title=request.title,
        description=request.description,
        priority=request.priority,
        status=request.status,
    )

    use_case = UpdateTaskUseCase(uow, audit_service, field_validator, predicate_builder)
    result = await use_case.execute(command)

    if result.is_err():
        raise client_error_for(result.error)

    return result.value


@router.delete("/tasks/{task_id}", response_model=DeleteTaskResponse, status_code=status.HTTP_200_OK)
async def delete_task(
    task_id: int,
    caller_id: int = Depends(get_caller_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
    predicate_builder: TaskPredicateBuilder = Depends(get_task_predicate_builder),
):
    """Delete one of the caller's tasks"""
    use_case = DeleteTaskUseCase(uow, audit_service, predicate_builder)
    result = await use_case.execute(task_id, caller_id)

    if not result.value.deleted:
        raise ClientError(
            Error(
                code="NOT_FOUND",
                message="Task not found or you don't have permission to delete it",
            ),
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return result.value
