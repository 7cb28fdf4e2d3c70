from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class AuditService(ABC):
    """Service interface for audit event logging"""

    @abstractmethod
    async def log_event(
        self,
        event_type: str,
        user_id: Optional[int],
        resource_type: str,
        resource_id: Optional[int],
        metadata: Dict[str, Any] = None,
    ) -> None:
        """
        Log an audit event

        Args:
            event_type: Type of event (e.g. "task_created", "task_deleted")
            user_id: Internal id of the user who triggered the event
            resource_type: Type of resource (e.g. "task", "user")
            resource_id: ID of the affected resource
            metadata: Additional event metadata
        """
        pass
