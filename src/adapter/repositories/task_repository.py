from typing import Optional, List
from sqlalchemy import delete, or_
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import TaskRepository
from src.app.services.pagination import PageRequest
from src.app.services.task_predicate_builder import Operator, TaskCondition, TaskPredicate
from src.domain import Task


def condition_to_clause(condition: TaskCondition):
    """Translate one predicate condition into a SQL expression over Task columns"""
    columns = [getattr(Task, name) for name in condition.fields]
    if condition.operator == Operator.CONTAINS:
        # autoescape keeps % and _ in user input literal
        return or_(*[column.contains(condition.value, autoescape=True) for column in columns])
    return or_(*[column == condition.value for column in columns])


def apply_predicate(statement, predicate: TaskPredicate):
    for condition in predicate.conditions:
        statement = statement.where(condition_to_clause(condition))
    return statement


class SqlAlchemyTaskRepository(TaskRepository):
    """SQLAlchemy implementation of TaskRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, task: Task) -> Task:
        """Create a new task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def find_one(self, predicate: TaskPredicate) -> Optional[Task]:
        """Get the first task matching the predicate"""
        statement = apply_predicate(select(Task), predicate).order_by(Task.id)
        result = await self.session.exec(statement)
        return result.first()

    async def find_page(self, predicate: TaskPredicate, page: PageRequest) -> List[Task]:
        """Get one page of tasks matching the predicate, ordered by id"""
        statement = apply_predicate(select(Task), predicate)
        statement = statement.order_by(Task.id).offset(page.offset).limit(page.page_size)
        result = await self.session.exec(statement)
        return list(result.all())

    async def update(self, task: Task) -> Task:
        """Update an existing task"""
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        """Delete a task; raises StaleDataError if the row is already gone"""
        statement = delete(Task).where(Task.id == task.id, Task.owner_id == task.owner_id)
        result = await self.session.execute(statement)
        if result.rowcount != 1:
            raise StaleDataError(
                f"DELETE on task {task.id} expected to delete 1 row; {result.rowcount} were matched"
            )

    async def delete_by_owner(self, owner_id: int) -> int:
        """Delete every task owned by a user, returning the number removed"""
        statement = delete(Task).where(Task.owner_id == owner_id)
        result = await self.session.execute(statement)
        return result.rowcount
