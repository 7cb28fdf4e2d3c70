"""
Composable filters over the Task collection.

A TaskPredicate is an AND of TaskConditions. Each condition names one or more
Task fields and matches when any of them satisfies the operator, which is how
the free-text search expresses "title OR description". The repository turns a
predicate into SQL.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple
from src.domain.enums import TaskPriority

logger = logging.getLogger(__name__)

FILTERABLE_FIELDS = frozenset({"id", "title", "description", "priority", "status", "owner_id"})


class Operator(str, Enum):
    EQUALS = "eq"
    CONTAINS = "contains"


@dataclass(frozen=True)
class TaskCondition:
    fields: Tuple[str, ...]
    operator: Operator
    value: Any

    def __post_init__(self):
        if not self.fields:
            raise ValueError("A condition needs at least one field")
        unknown = [name for name in self.fields if name not in FILTERABLE_FIELDS]
        if unknown:
            raise ValueError(f"Unknown task field(s): {', '.join(unknown)}")
        if not isinstance(self.operator, Operator):
            raise ValueError(f"Unsupported operator: {self.operator!r}")
        if self.operator == Operator.CONTAINS and not isinstance(self.value, str):
            raise ValueError("CONTAINS needs a string operand")


def equals(field: str, value: Any) -> TaskCondition:
    return TaskCondition(fields=(field,), operator=Operator.EQUALS, value=value)


def contains_any(fields: Tuple[str, ...], text: str) -> TaskCondition:
    return TaskCondition(fields=tuple(fields), operator=Operator.CONTAINS, value=text)


@dataclass(frozen=True)
class TaskPredicate:
    conditions: Tuple[TaskCondition, ...] = ()

    def and_(self, condition: TaskCondition) -> "TaskPredicate":
        return TaskPredicate(conditions=self.conditions + (condition,))


class TaskPredicateBuilder:
    """Builds ownership-scoped predicates from optional filter inputs"""

    FALLBACK_PRIORITY = TaskPriority.HIGH.value

    def by_filters(
        self,
        owner_id: Optional[int] = None,
        priority: Optional[str] = None,
        status: Optional[str] = None,
    ) -> TaskPredicate:
        """
        Structured filter mode: exact matches on priority, status and owner

        Filter values are compared as stored strings and are not validated, so
        an unknown priority simply matches nothing.

        Known quirk: if composing the predicate fails, the request is not
        failed. It degrades to HIGH priority tasks of the same owner.
        """
        try:
            return self._compose_filters(owner_id, priority, status)
        except Exception as e:
            logger.warning(
                f"Task filter construction failed ({type(e).__name__}: {e}), "
                f"falling back to priority={self.FALLBACK_PRIORITY}"
            )
            return self.fallback(owner_id)

    def by_search_text(
        self, owner_id: Optional[int] = None, search_text: Optional[str] = None
    ) -> TaskPredicate:
        """Free-text mode: case-sensitive substring match on title or description"""
        predicate = TaskPredicate()
        if search_text is None or not search_text.strip():
            logger.info("Empty search text, matching every task in scope")
        else:
            logger.info(f"Searching tasks with input: {search_text}")
            predicate = predicate.and_(contains_any(("title", "description"), search_text))

        if owner_id is not None:
            predicate = predicate.and_(equals("owner_id", owner_id))
        return predicate

    def by_id_and_owner(self, task_id: int, owner_id: int) -> TaskPredicate:
        return TaskPredicate((equals("id", task_id), equals("owner_id", owner_id)))

    def fallback(self, owner_id: Optional[int] = None) -> TaskPredicate:
        predicate = TaskPredicate((equals("priority", self.FALLBACK_PRIORITY),))
        if owner_id is not None:
            predicate = predicate.and_(equals("owner_id", owner_id))
        return predicate

    def _compose_filters(
        self, owner_id: Optional[int], priority: Optional[str], status: Optional[str]
    ) -> TaskPredicate:
        predicate = TaskPredicate()
        if priority is not None:
            predicate = predicate.and_(equals("priority", priority))
        if status is not None:
            predicate = predicate.and_(equals("status", status))
        if owner_id is not None:
            predicate = predicate.and_(equals("owner_id", owner_id))
        return predicate
