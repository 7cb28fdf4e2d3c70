import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Error, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories import UserRepository
from src.adapter.repositories import SqlAlchemyUserRepository
from src.domain import User, DEFAULT_USER_NAME
from .dtos import CallerIdentity

logger = logging.getLogger(__name__)


class ResolveCallerUseCase:
    """Maps an authenticated identity to an internal user id, provisioning on first sight"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Optional[CallerIdentity]) -> Result[int]:
        """
        Resolve the caller id used to scope every task operation

        Returns:
            Result[int]: Internal user id, or UNAUTHENTICATED when no subject is asserted
        """
        if identity is None or not identity.external_id:
            logger.error("Authentication is null or carries no subject")
            return Return.err(Error(code="UNAUTHENTICATED", message="Invalid authentication"))

        async with self.uow as session:
            user_repo: UserRepository = SqlAlchemyUserRepository(session.session)

            user = await user_repo.get_by_external_id(identity.external_id)
            if user is not None:
                return Return.ok(user.id)

            logger.info(f"Creating new user for external ID: {identity.external_id}")
            new_user = User(
                external_id=identity.external_id,
                user_name=identity.user_name or DEFAULT_USER_NAME,
            )
            try:
                created_user = await user_repo.create(new_user)
                await self.uow.commit()
            except IntegrityError:
                # Another request provisioned the same subject first
                await self.uow.rollback()
                existing = await user_repo.get_by_external_id(identity.external_id)
                if existing is None:
                    raise
                return Return.ok(existing.id)

            logger.info(f"Created new user with ID: {created_user.id}")
            return Return.ok(created_user.id)
