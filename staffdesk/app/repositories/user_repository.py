from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from staffdesk.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_email_or_username(self, email: str, username: str) -> Optional[User]:
        """Get the first user matching either the email or the username"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user; raises UniqueConstraintError on a taken username or email"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user; raises UniqueConstraintError on a taken username or email"""
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete user"""
        pass
