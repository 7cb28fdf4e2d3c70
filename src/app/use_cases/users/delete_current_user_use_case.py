import logging
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.app.repositories import TaskRepository, UserRepository
from src.adapter.repositories import SqlAlchemyTaskRepository, SqlAlchemyUserRepository
from .dtos import DeleteUserResponse

logger = logging.getLogger(__name__)


class DeleteCurrentUserUseCase:
    """Use case for removing the caller's account together with all of their tasks"""

    def __init__(self, uow: UnitOfWork, audit_service: AuditService):
        self.uow = uow
        self.audit_service = audit_service

    async def execute(self, user_id: int) -> Result[DeleteUserResponse]:
        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)
            user_repo: UserRepository = SqlAlchemyUserRepository(session.session)

            user = await user_repo.get_by_id(user_id)
            if user is None:
                return Return.err(Error(code="NOT_FOUND", message=f"User {user_id} not found"))

            # Tasks go first so no row is left pointing at a missing owner
            deleted_tasks = await task_repo.delete_by_owner(user_id)
            await user_repo.delete(user)
            await self.uow.commit()
            logger.info(f"Deleted user {user_id} and {deleted_tasks} owned tasks")

            await self.audit_service.log_event(
                event_type="user_deleted",
                user_id=user_id,
                resource_type="user",
                resource_id=user_id,
                metadata={"deleted_tasks": deleted_tasks},
            )

            return Return.ok(DeleteUserResponse(user_id=user_id, deleted_tasks=deleted_tasks))
