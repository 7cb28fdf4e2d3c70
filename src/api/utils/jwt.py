from typing import List, Optional
import logging

from jose import JWTError, jwt

from config import ApplicationConfig

logger = logging.getLogger(__name__)


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode a bearer token issued by the identity provider

    Args:
        token: JWT token string

    Returns:
        Decoded claims (sub, preferred_username, roles) or None if invalid
    """
    options = {"verify_aud": ApplicationConfig.JWT_AUDIENCE is not None}
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
            audience=ApplicationConfig.JWT_AUDIENCE,
            options=options,
        )
        logger.debug(f"JWT verification successful for subject: {payload.get('sub')}")
        return payload
    except JWTError as e:
        logger.error(f"JWT verification failed: {type(e).__name__} - {str(e)}")
        return None


def extract_roles(claims: dict) -> List[str]:
    """Collect roles from a flat "roles" claim and Keycloak's realm_access.roles"""
    roles = list(claims.get("roles") or [])
    realm_access = claims.get("realm_access") or {}
    roles.extend(realm_access.get("roles") or [])
    return roles


def has_task_access(claims: dict, allowed_roles: List[str]) -> bool:
    return any(role in allowed_roles for role in extract_roles(claims))
