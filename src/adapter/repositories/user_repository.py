from typing import Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlmodel import select
from src.app.repositories import UserRepository
from src.domain import User


class SqlAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of UserRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by internal ID"""
        statement = select(User).where(User.id == user_id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_by_external_id(self, external_id: str) -> Optional[User]:
        """Get user by identity-provider subject"""
        statement = select(User).where(User.external_id == external_id)
        result = await self.session.exec(statement)
        return result.first()

    async def delete(self, user: User) -> None:
        """Delete a user row"""
        await self.session.delete(user)
        await self.session.flush()
