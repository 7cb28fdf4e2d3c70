import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.pagination import PageRequest, MAX_PAGE_SIZE
from src.app.services.task_predicate_builder import TaskPredicateBuilder
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from .dtos import ListTasksCommand, TaskDTO

logger = logging.getLogger(__name__)


class ListTasksUseCase:
    """Use case for listing the caller's tasks filtered by priority and status"""

    def __init__(
        self,
        uow: UnitOfWork,
        predicate_builder: TaskPredicateBuilder = None,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self.uow = uow
        self.predicate_builder = predicate_builder or TaskPredicateBuilder()
        self.max_page_size = max_page_size

    async def execute(self, command: ListTasksCommand) -> Result[list[TaskDTO]]:
        """
        Execute the list tasks use case

        Filter values are not validated; an unknown priority or status yields
        an empty page instead of an error.

        Returns:
            Result[list[TaskDTO]]: One page of tasks, possibly empty
        """
        predicate = self.predicate_builder.by_filters(
            owner_id=command.owner_id, priority=command.priority, status=command.status
        )
        page = PageRequest.of(command.page_size, command.page_number, self.max_page_size)

        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)
            tasks = await task_repo.find_page(predicate, page)
            task_dtos = [TaskDTO.from_entity(task) for task in tasks]

        if not tasks:
            logger.info(
                f"No tasks found with priority: {command.priority} and status: {command.status}"
            )
        else:
            logger.info(
                f"Found {len(tasks)} tasks with priority: {command.priority} and status: {command.status}"
            )

        return Return.ok(task_dtos)
