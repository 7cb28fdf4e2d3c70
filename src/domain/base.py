from datetime import datetime, timezone
from sqlmodel import SQLModel


def utc_now() -> datetime:
    """Timezone-aware current time; timestamp columns are TIMESTAMP WITH TIME ZONE"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Base class for all persisted entities"""

    pass
