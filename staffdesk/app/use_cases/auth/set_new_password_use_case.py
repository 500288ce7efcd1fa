"""
Set New Password Use Case

Completes a password reset using the token issued by OTP confirmation.
"""

import logging
from uuid import UUID

from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.token_service import InvalidTokenError, TokenPurpose, TokenService
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.domain.base import utcnow
from staffdesk.libs.result import Error, Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class SetNewPasswordUseCase:
    """
    Use case for setting a new password after OTP confirmation.

    Business Rules:
    - Token must verify against the reset secret; bad signature and expiry
      both yield INVALID_TOKEN
    - The token, not the challenge row, authorizes the change
    - Password update and challenge removal commit together
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService, hasher: PasswordHasher):
        self.uow = uow
        self.tokens = tokens
        self.hasher = hasher

    async def execute(self, reset_token: str, new_password: str) -> Result[MessageResponse]:
        """
        Execute set new password use case.

        Args:
            reset_token: JWT from confirm OTP
            new_password: Plain text new password

        Returns:
            Result with acknowledgment, or INVALID_TOKEN / USER_NOT_FOUND
        """
        try:
            payload = self.tokens.verify(reset_token, TokenPurpose.password_reset)
        except InvalidTokenError:
            return Return.err(
                Error(ErrorCode.INVALID_TOKEN.value, "Invalid or expired reset token.")
            )

        user_id = UUID(payload["user_id"])

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND.value, "User not found."))

            user.password_hash = await self.hasher.hash(new_password)
            user.updated_at = utcnow()
            await self.uow.users.update(user)

            await self.uow.password_resets.delete_by_user_id(user.id)

            await self.uow.commit()

            logger.info("Password reset completed for user %s", user.id)
            return Return.ok(
                MessageResponse(message="Password has been successfully reset.")
            )
