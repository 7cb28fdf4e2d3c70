import pytest_asyncio
from unittest.mock import AsyncMock
from fastapi import Request
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
import src.domain  # noqa: F401 - registers tables on SQLModel.metadata


def _configure_sqlite(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    # Match PostgreSQL: LIKE is case-sensitive and foreign keys are enforced
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", _configure_sqlite)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
def make_uow(session_factory):
    """Fresh unit of work per call, like one per request in the app"""

    def factory():
        return SqlAlchemyUnitOfWork(session_factory())

    return factory


@pytest_asyncio.fixture
async def client(session_factory):
    from src.api.app import create_app
    from config import ApplicationConfig
    from src.depends import get_audit_service, get_current_user, get_unit_of_work

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    async def override_get_audit_service():
        return AsyncMock()

    async def override_get_current_user(request: Request):
        # Tests pick the caller with a header instead of minting tokens
        subject = request.headers.get("X-Test-User", "user-a")
        roles = request.headers.get("X-Test-Roles", "role_manage_task").split(",")
        return {"sub": subject, "preferred_username": subject, "roles": roles}

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_audit_service] = override_get_audit_service
    app.dependency_overrides[get_current_user] = override_get_current_user

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
