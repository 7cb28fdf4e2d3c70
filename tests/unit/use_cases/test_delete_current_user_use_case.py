import pytest
from unittest.mock import AsyncMock, patch
from src.app.use_cases.users import DeleteCurrentUserUseCase
from src.domain import User


@pytest.mark.asyncio
async def test_delete_user_removes_tasks_first(mock_uow):
    mock_audit_service = AsyncMock()
    use_case = DeleteCurrentUserUseCase(mock_uow, mock_audit_service)
    user = User(id=3, external_id="kc-3")

    with patch(
        "src.app.use_cases.users.delete_current_user_use_case.SqlAlchemyTaskRepository"
    ) as MockTaskRepo, patch(
        "src.app.use_cases.users.delete_current_user_use_case.SqlAlchemyUserRepository"
    ) as MockUserRepo:
        calls = []
        mock_task_repo_instance = MockTaskRepo.return_value
        mock_task_repo_instance.delete_by_owner = AsyncMock(
            side_effect=lambda owner_id: calls.append("tasks") or 2
        )
        mock_user_repo_instance = MockUserRepo.return_value
        mock_user_repo_instance.get_by_id = AsyncMock(return_value=user)
        mock_user_repo_instance.delete = AsyncMock(side_effect=lambda u: calls.append("user"))

        result = await use_case.execute(3)

        assert result.is_ok()
        assert result.value.deleted_tasks == 2
        assert calls == ["tasks", "user"]
        mock_task_repo_instance.delete_by_owner.assert_called_once_with(3)
        mock_uow.commit.assert_called_once()
        assert mock_audit_service.log_event.call_args[1]["event_type"] == "user_deleted"


@pytest.mark.asyncio
async def test_delete_missing_user(mock_uow):
    use_case = DeleteCurrentUserUseCase(mock_uow, AsyncMock())

    with patch(
        "src.app.use_cases.users.delete_current_user_use_case.SqlAlchemyUserRepository"
    ) as MockUserRepo:
        MockUserRepo.return_value.get_by_id = AsyncMock(return_value=None)

        result = await use_case.execute(404)

        assert result.is_err()
        assert result.error.code == "NOT_FOUND"
