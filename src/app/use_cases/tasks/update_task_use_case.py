import logging
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.services.task_field_validator import TaskFieldValidator
from src.app.services.task_predicate_builder import TaskPredicateBuilder
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from src.domain import MAX_TITLE_LENGTH
from .dtos import UpdateTaskCommand, TaskDTO

logger = logging.getLogger(__name__)


class UpdateTaskUseCase:
    """Use case for replacing the content of one of the caller's tasks"""

    def __init__(
        self,
        uow: UnitOfWork,
        audit_service: AuditService,
        field_validator: TaskFieldValidator,
        predicate_builder: TaskPredicateBuilder = None,
    ):
        self.uow = uow
        self.audit_service = audit_service
        self.field_validator = field_validator
        self.predicate_builder = predicate_builder or TaskPredicateBuilder()

    async def execute(self, command: UpdateTaskCommand) -> Result[TaskDTO]:
        """
        Execute the update task use case

        All mutable fields are overwritten (full replace, not a patch). Concurrent
        updates are not detected; the last writer wins.

        Returns:
            Result[TaskDTO]: The updated task, or INVALID_FILTER_VALUE / NOT_FOUND
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

            # Someone else's task is reported exactly like a missing one
            task = await task_repo.find_one(
                self.predicate_builder.by_id_and_owner(command.task_id, command.owner_id)
            )
            if task is None:
                return Return.err(
                    Error(code="NOT_FOUND", message=f"Task not found with id: {command.task_id}")
                )

            task.replace_content(command.title.strip(), command.description or "", priority, status)
            updated_task = await task_repo.update(task)
            await self.uow.commit()
            logger.info(f"Updated task with id: {updated_task.id}")

            await self.audit_service.log_event(
                event_type="task_updated",
                user_id=command.owner_id,
                resource_type="task",
                resource_id=updated_task.id,
                metadata={"priority": updated_task.priority, "status": updated_task.status},
            )

            return Return.ok(TaskDTO.from_entity(updated_task))
