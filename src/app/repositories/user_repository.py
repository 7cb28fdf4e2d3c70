from abc import ABC, abstractmethod
from typing import Optional
from src.domain import User


class UserRepository(ABC):
    """Repository interface for User entity"""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by internal ID"""
        pass

    @abstractmethod
    async def get_by_external_id(self, external_id: str) -> Optional[User]:
        """Get user by identity-provider subject"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user row"""
        pass
