import pytest
from httpx import AsyncClient, ASGITransport
from jose import jwt
from config import ApplicationConfig


@pytest.fixture
def app(session_factory):
    from unittest.mock import AsyncMock
    from src.api.app import create_app
    from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
    from src.depends import get_audit_service, get_unit_of_work

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    async def override_get_audit_service():
        return AsyncMock()

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_audit_service] = override_get_audit_service
    return app


def bearer(claims: dict) -> dict:
    token = jwt.encode(claims, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM)
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_missing_token_is_unauthenticated(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/api/v1/tasks")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_invalid_token_is_unauthenticated(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/api/v1/tasks", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_without_subject_is_unauthenticated(app):
    headers = bearer({"realm_access": {"roles": ["role_manage_task"]}})

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/api/v1/tasks", headers=headers)

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_valid_keycloak_style_token_provisions_user(app):
    headers = bearer(
        {"sub": "kc-42", "preferred_username": "dana", "realm_access": {"roles": ["role_manage_task"]}}
    )
    payload = {"title": "From token", "description": "", "priority": "MEDIUM", "status": "PENDING"}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        created = await client.post("/api/v1/tasks", json=payload, headers=headers)
        listed = await client.get("/api/v1/tasks", headers=headers)

    assert created.status_code == 201
    assert [t["title"] for t in listed.json()] == ["From token"]
