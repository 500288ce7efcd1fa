"""
Change Password Use Case

Lets an authenticated user replace their password.
"""

import logging
from uuid import UUID

from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.auth.dtos import MessageResponse
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.domain.base import utcnow
from staffdesk.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing the password of the logged-in user.

    Business Rules:
    - Old password and its confirmation must be identical (checked first)
    - Old password must verify against the stored hash
    - Existing session tokens stay valid (no revocation)
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(
        self,
        user_id: UUID,
        old_password: str,
        confirm_old_password: str,
        new_password: str,
    ) -> Result[MessageResponse]:
        """
        Execute change password use case.

        Args:
            user_id: Authenticated user (from the session token)
            old_password: Current password
            confirm_old_password: Current password typed again
            new_password: Replacement password

        Returns:
            Result with acknowledgment, or PASSWORD_MISMATCH /
            USER_NOT_FOUND / INCORRECT_PASSWORD
        """
        if old_password != confirm_old_password:
            return Return.err(
                Error(ErrorCode.PASSWORD_MISMATCH.value, "Old passwords do not match.")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND.value, "User not found."))

            if not await self.hasher.verify(old_password, user.password_hash):
                return Return.err(
                    Error(ErrorCode.INCORRECT_PASSWORD.value, "Old password is incorrect.")
                )

            user.password_hash = await self.hasher.hash(new_password)
            user.updated_at = utcnow()
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info("Password changed for user %s", user.id)
            return Return.ok(
                MessageResponse(message="Password has been successfully changed.")
            )
