import logging
from sqlalchemy.orm.exc import StaleDataError
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.services.task_predicate_builder import TaskPredicateBuilder
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from .dtos import DeleteTaskResponse

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    """Use case for deleting one of the caller's tasks"""

    def __init__(
        self,
        uow: UnitOfWork,
        audit_service: AuditService,
        predicate_builder: TaskPredicateBuilder = None,
    ):
        self.uow = uow
        self.audit_service = audit_service
        self.predicate_builder = predicate_builder or TaskPredicateBuilder()

    async def execute(self, task_id: int, owner_id: int) -> Result[DeleteTaskResponse]:
        """
        Execute the delete task use case

        Never fails: a missing task, a task of another user and a concurrent
        modification all come back as deleted=False.

        Args:
            task_id: ID of the task to delete
            owner_id: Resolved caller id

        Returns:
            Result[DeleteTaskResponse]: Whether the task was found and deleted
        """
        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)

            task = await task_repo.find_one(self.predicate_builder.by_id_and_owner(task_id, owner_id))
            if task is None:
                logger.warning(
                    f"Task not found or not owned by caller: user_id={owner_id}, task_id={task_id}"
                )
                return Return.ok(DeleteTaskResponse(deleted=False))

            try:
                await task_repo.delete(task)
                await self.uow.commit()
            except StaleDataError as e:
                logger.warning(f"Concurrent modification while deleting task {task_id}: {e}")
                await self.uow.rollback()
                return Return.ok(DeleteTaskResponse(deleted=False))

            logger.info(f"Deleted task with id: {task_id}")
            await self.audit_service.log_event(
                event_type="task_deleted",
                user_id=owner_id,
                resource_type="task",
                resource_id=task_id,
            )

            return Return.ok(DeleteTaskResponse(deleted=True))
