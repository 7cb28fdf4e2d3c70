from src.app.use_cases.users.resolve_caller_use_case import ResolveCallerUseCase
from src.app.use_cases.users.delete_current_user_use_case import DeleteCurrentUserUseCase
from src.app.use_cases.users.dtos import CallerIdentity, DeleteUserResponse

__all__ = [
    "ResolveCallerUseCase",
    "DeleteCurrentUserUseCase",
    "CallerIdentity",
    "DeleteUserResponse",
]
