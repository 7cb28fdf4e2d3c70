import logging
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from motor.motor_asyncio import AsyncIOMotorClient
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.adapter.services.audit_service import MongoAuditService
from src.app.services.task_field_validator import TaskFieldValidator
from src.app.services.task_predicate_builder import TaskPredicateBuilder
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import ResolveCallerUseCase, CallerIdentity
from src.api.error import ClientError, client_error_for
from src.api.utils.jwt import verify_jwt, has_task_access

logger = logging.getLogger(__name__)

# PostgreSQL engine
engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# MongoDB client
mongo_client = AsyncIOMotorClient(ApplicationConfig.MONGODB_URI)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_audit_service() -> MongoAuditService:
    return MongoAuditService(mongo_client, ApplicationConfig.MONGODB_DB_NAME)


def get_task_field_validator() -> TaskFieldValidator:
    return TaskFieldValidator()


def get_task_predicate_builder() -> TaskPredicateBuilder:
    return TaskPredicateBuilder()


# Security
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and validate JWT token from Authorization header

    Returns:
        dict: Decoded JWT claims (sub, preferred_username, roles)

    Raises:
        ClientError: 401 if token is missing or invalid
    """
    if ApplicationConfig.AUTH_DISABLED:
        # For testing/development - return mock user
        return {
            "sub": "dev-user",
            "preferred_username": "dev",
            "roles": list(ApplicationConfig.TASK_ROLES),
        }

    if credentials is None:
        logger.error("No credentials provided")
        raise ClientError(
            Error(code="UNAUTHENTICATED", message="No authorization header"),
            status_code=401,
        )

    payload = verify_jwt(credentials.credentials)

    if payload is None:
        raise ClientError(
            Error(code="UNAUTHENTICATED", message="Invalid or expired token"),
            status_code=401,
        )

    return payload


async def require_task_access(current_user: dict = Depends(get_current_user)) -> dict:
    """Only callers holding one of the task roles may reach the task endpoints"""
    if not has_task_access(current_user, ApplicationConfig.TASK_ROLES):
        logger.warning(f"User {current_user.get('sub')} has no task role")
        raise ClientError(
            Error(code="FORBIDDEN", message="Missing task management role"),
            status_code=403,
        )
    return current_user


async def get_caller_id(
    current_user: dict = Depends(require_task_access),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> int:
    """Resolve the internal user id once per request; every task operation is scoped to it"""
    result = await ResolveCallerUseCase(uow).execute(CallerIdentity.from_claims(current_user))
    if result.is_err():
        raise client_error_for(result.error)
    return result.value
