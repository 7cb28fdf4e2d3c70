from enum import Enum
from typing import Optional, Tuple, Type, TypeVar
from libs.result import Result, Error, Return
from src.domain.enums import TaskPriority, TaskStatus

E = TypeVar("E", bound=Enum)

INVALID_FILTER_VALUE = "INVALID_FILTER_VALUE"


class TaskFieldValidator:
    """Service for turning free-text priority/status input into domain enums"""

    def parse_priority(self, raw: Optional[str]) -> Result[TaskPriority]:
        return self._parse(TaskPriority, "priority", raw)

    def parse_status(self, raw: Optional[str]) -> Result[TaskStatus]:
        return self._parse(TaskStatus, "status", raw)

    def validate(
        self, priority_raw: Optional[str], status_raw: Optional[str]
    ) -> Result[Tuple[TaskPriority, TaskStatus]]:
        """
        Validate both enum fields of a task write

        Args:
            priority_raw: Priority as typed by the caller, any case
            status_raw: Status as typed by the caller, any case

        Returns:
            Result[Tuple[TaskPriority, TaskStatus]]: Parsed pair, or the first failure
        """
        priority = self.parse_priority(priority_raw)
        if priority.is_err():
            return Return.err(priority.error)

        status = self.parse_status(status_raw)
        if status.is_err():
            return Return.err(status.error)

        return Return.ok((priority.value, status.value))

    def _parse(self, enum_cls: Type[E], field: str, raw: Optional[str]) -> Result[E]:
        if isinstance(raw, str):
            candidate = raw.strip().upper()
            if candidate in enum_cls.__members__:
                return Return.ok(enum_cls[candidate])

        return Return.err(
            Error(
                code=INVALID_FILTER_VALUE,
                message=f"Invalid {field} value: {raw}",
                reason="Expected one of: " + ", ".join(enum_cls.__members__),
            )
        )
