from typing import Optional
from pydantic import BaseModel


class CallerIdentity(BaseModel):
    """Identity assertion taken from a verified token"""

    external_id: Optional[str] = None  # "sub" claim
    user_name: Optional[str] = None  # "preferred_username" claim

    @classmethod
    def from_claims(cls, claims: dict) -> "CallerIdentity":
        return cls(external_id=claims.get("sub"), user_name=claims.get("preferred_username"))


class DeleteUserResponse(BaseModel):
    """Response DTO for DeleteCurrentUserUseCase"""

    user_id: int
    deleted_tasks: int
