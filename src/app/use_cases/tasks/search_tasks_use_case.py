import logging
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.pagination import PageRequest, MAX_PAGE_SIZE
from src.app.services.task_predicate_builder import TaskPredicateBuilder
from src.app.repositories import TaskRepository
from src.adapter.repositories import SqlAlchemyTaskRepository
from .dtos import SearchTasksCommand, TaskDTO

logger = logging.getLogger(__name__)


class SearchTasksUseCase:
    """Use case for free-text search over the caller's tasks"""

    def __init__(
        self,
        uow: UnitOfWork,
        predicate_builder: TaskPredicateBuilder = None,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self.uow = uow
        self.predicate_builder = predicate_builder or TaskPredicateBuilder()
        self.max_page_size = max_page_size

    async def execute(self, command: SearchTasksCommand) -> Result[list[TaskDTO]]:
        predicate = self.predicate_builder.by_search_text(
            owner_id=command.owner_id, search_text=command.search
        )
        page = PageRequest.of(command.page_size, command.page_number, self.max_page_size)

        async with self.uow as session:
            task_repo: TaskRepository = SqlAlchemyTaskRepository(session.session)
            tasks = await task_repo.find_page(predicate, page)
            task_dtos = [TaskDTO.from_entity(task) for task in tasks]

        logger.info(f"Found {len(tasks)} tasks with search input: {command.search}")
        return Return.ok(task_dtos)
