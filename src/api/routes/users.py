from fastapi import APIRouter, Depends, Response, status
from src.api.error import client_error_for
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.audit_service import AuditService
from src.depends import get_unit_of_work, get_audit_service, get_caller_id
from src.app.use_cases.users import DeleteCurrentUserUseCase

router = APIRouter()


@router.delete("/users/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_current_user(
    caller_id: int = Depends(get_caller_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit_service: AuditService = Depends(get_audit_service),
):
    """Delete the caller's account and every task they own"""
    use_case = DeleteCurrentUserUseCase(uow, audit_service)
    result = await use_case.execute(caller_id)

    if result.is_err():
        raise client_error_for(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
