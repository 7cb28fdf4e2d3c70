from jose import jwt
from config import ApplicationConfig
from src.api.utils.jwt import verify_jwt, extract_roles, has_task_access


def make_token(claims: dict, secret: str = None) -> str:
    return jwt.encode(
        claims, secret or ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def test_verify_jwt_returns_claims():
    token = make_token({"sub": "kc-1", "preferred_username": "alice"})

    payload = verify_jwt(token)

    assert payload["sub"] == "kc-1"
    assert payload["preferred_username"] == "alice"


def test_verify_jwt_rejects_wrong_signature():
    token = make_token({"sub": "kc-1"}, secret="another-secret")

    assert verify_jwt(token) is None


def test_verify_jwt_rejects_garbage():
    assert verify_jwt("not-a-token") is None


def test_extract_roles_merges_flat_and_realm_roles():
    claims = {"roles": ["a"], "realm_access": {"roles": ["role_manage_task"]}}

    assert extract_roles(claims) == ["a", "role_manage_task"]


def test_has_task_access():
    allowed = ["role_manage_task", "role_admin"]

    assert has_task_access({"realm_access": {"roles": ["role_admin"]}}, allowed)
    assert not has_task_access({"roles": ["viewer"]}, allowed)
    assert not has_task_access({}, allowed)
