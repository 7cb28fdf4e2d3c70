from datetime import datetime
from typing import Optional
from sqlalchemy import Column, DateTime
from sqlmodel import Field
from src.domain.base import BaseModel, utc_now

DEFAULT_USER_NAME = "Unknown"


class User(BaseModel, table=True):
    __tablename__ = "task_user"

    id: Optional[int] = Field(default=None, primary_key=True)
    # Subject claim issued by the identity provider
    external_id: str = Field(max_length=255, nullable=False, unique=True, index=True)
    user_name: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )
