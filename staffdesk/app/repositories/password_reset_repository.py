from abc import ABC, abstractmethod
from datetime import datetime
from typing import List
from uuid import UUID

from staffdesk.domain.entities import PasswordReset


class IPasswordResetRepository(ABC):
    """PasswordReset repository interface - application layer"""

    @abstractmethod
    async def upsert(self, user_id: UUID, otp_hash: str, expires_at: datetime) -> PasswordReset:
        """Create the user's reset challenge, or overwrite the existing one"""
        pass

    @abstractmethod
    async def get_active(self, now: datetime) -> List[PasswordReset]:
        """Get all challenges expiring strictly after now"""
        pass

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID, now: datetime) -> List[PasswordReset]:
        """Get the user's challenge if it expires strictly after now"""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete the user's challenge, returning the number of rows removed"""
        pass
