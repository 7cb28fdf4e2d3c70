import logging
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.services.task_field_validator import TaskFieldValidator
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from src.domain import Task, MAX_TITLE_LENGTH
from .dtos import CreateTaskCommand, CreateTaskResponse

logger = logging.getLogger(__name__)


class CreateTaskUseCase:
    """Use case for creating a task owned by the caller"""

    def __init__(
        self,
        uow: UnitOfWork,
        audit_service: AuditService,
        field_validator: TaskFieldValidator,
    ):
        self.uow = uow
        self.audit_service = audit_service
        self.field_validator = field_validator

    async def execute(self, command: CreateTaskCommand) -> Result[CreateTaskResponse]:
        """
        Execute the create task use case

        Returns:
            Result[CreateTaskResponse]: Success with the new task id or error
        """
        parsed = self.field_validator.validate(command.priority, command.status)
        if parsed.is_err():
            return Return.err(parsed.error)
        priority, status = parsed.value

        if not command.title or len(command.title.strip()) == 0:
            return Return.err(Error(code="INVALID_INPUT", message="Task title cannot be empty"))
        if len(command.title.strip()) > MAX_TITLE_LENGTH:
            return Return.err(
                Error(
                    code="INVALID_INPUT",
                    message=f"Task title cannot exceed {MAX_TITLE_LENGTH} characters",
                )
            )

        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)

            # Owner always comes from the resolved caller
            task = Task(
                title=command.title.strip(),
                description=command.description or "",
                priority=priority.value,
                status=status.value,
                owner_id=command.owner_id,
            )

            created_task = await task_repo.create(task)
            await self.uow.commit()
            logger.info(f"Created task {created_task.id} for user {command.owner_id}")

            await self.audit_service.log_event(
                event_type="task_created",
                user_id=command.owner_id,
                resource_type="task",
                resource_id=created_task.id,
                metadata={
                    "title": created_task.title,
                    "priority": created_task.priority,
                    "status": created_task.status,
                },
            )

            return Return.ok(CreateTaskResponse(id=created_task.id))
