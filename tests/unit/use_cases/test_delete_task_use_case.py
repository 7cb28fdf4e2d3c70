import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy.orm.exc import StaleDataError
from src.app.use_cases.tasks import DeleteTaskUseCase
from src.domain import Task


def owned_task():
    return Task(id=1, title="Ship", description="", priority="HIGH", status="PENDING", owner_id=1)


@pytest.mark.asyncio
async def test_delete_task_success(mock_uow):
    mock_audit_service = AsyncMock()
    use_case = DeleteTaskUseCase(mock_uow, mock_audit_service)

    with patch(
        "src.app.use_cases.tasks.delete_task_use_case.SqlAlchemyTaskRepository"
    ) as MockTaskRepo:
        mock_task_repo_instance = MockTaskRepo.return_value
        mock_task_repo_instance.find_one = AsyncMock(return_value=owned_task())
        mock_task_repo_instance.delete = AsyncMock()

        result = await use_case.execute(task_id=1, owner_id=1)

        assert result.is_ok()
        assert result.value.deleted is True
        mock_task_repo_instance.delete.assert_called_once()
        mock_uow.commit.assert_called_once()
        assert mock_audit_service.log_event.call_args[1]["event_type"] == "task_deleted"


@pytest.mark.asyncio
async def test_delete_task_not_found_returns_false(mock_uow):
    mock_audit_service = AsyncMock()
    use_case = DeleteTaskUseCase(mock_uow, mock_audit_service)

    with patch(
        "src.app.use_cases.tasks.delete_task_use_case.SqlAlchemyTaskRepository"
    ) as MockTaskRepo:
        mock_task_repo_instance = MockTaskRepo.return_value
        mock_task_repo_instance.find_one = AsyncMock(return_value=None)
        mock_task_repo_instance.delete = AsyncMock()

        result = await use_case.execute(task_id=1, owner_id=2)

        assert result.is_ok()
        assert result.value.deleted is False
        mock_task_repo_instance.delete.assert_not_called()
        mock_audit_service.log_event.assert_not_called()


@pytest.mark.asyncio
async def test_delete_task_concurrent_modification_returns_false(mock_uow):
    """Test a conflict during delete degrades to deleted=False instead of failing"""
    mock_audit_service = AsyncMock()
    use_case = DeleteTaskUseCase(mock_uow, mock_audit_service)

    with patch(
        "src.app.use_cases.tasks.delete_task_use_case.SqlAlchemyTaskRepository"
    ) as MockTaskRepo:
        mock_task_repo_instance = MockTaskRepo.return_value
        mock_task_repo_instance.find_one = AsyncMock(return_value=owned_task())
        mock_task_repo_instance.delete = AsyncMock(side_effect=StaleDataError("0 rows matched"))

        result = await use_case.execute(task_id=1, owner_id=1)

        assert result.is_ok()
        assert result.value.deleted is False
        mock_uow.commit.assert_not_called()
        mock_uow.rollback.assert_called()
        mock_audit_service.log_event.assert_not_called()


@pytest.mark.asyncio
async def test_delete_task_other_errors_propagate(mock_uow):
    use_case = DeleteTaskUseCase(mock_uow, AsyncMock())

    with patch(
        "src.app.use_cases.tasks.delete_task_use_case.SqlAlchemyTaskRepository"
    ) as MockTaskRepo:
        mock_task_repo_instance = MockTaskRepo.return_value
        mock_task_repo_instance.find_one = AsyncMock(return_value=owned_task())
        mock_task_repo_instance.delete = AsyncMock(side_effect=RuntimeError("db down"))

        with pytest.raises(RuntimeError):
            await use_case.execute(task_id=1, owner_id=1)
