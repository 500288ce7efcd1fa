"""
Confirm OTP Use Case

Exchanges a valid one-time code for a short-lived password reset token.
"""

import logging
from typing import List, Optional

from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.token_service import TokenPurpose, TokenService
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.domain.base import utcnow
from staffdesk.domain.entities import PasswordReset
from staffdesk.libs.result import Error, Result, Return
from .dtos import ConfirmOtpResponse

logger = logging.getLogger(__name__)


class ConfirmOtpUseCase:
    """
    Use case for OTP confirmation.

    Business Rules:
    - Only challenges with expires_at strictly in the future are considered
    - With an email, only that user's challenge is checked
    - Without an email, every active challenge is checked and the first
      match wins
    - The challenge is left in place; set-new-password consumes it
    - Reset token is signed with the reset secret and lives 15 minutes
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService, hasher: PasswordHasher):
        self.uow = uow
        self.tokens = tokens
        self.hasher = hasher

    async def _candidates(self, email: Optional[str]) -> List[PasswordReset]:
        now = utcnow()
        if email is None:
            return await self.uow.password_resets.get_active(now)

        user = await self.uow.users.get_by_email(email)
        if user is None:
            return []
        return await self.uow.password_resets.get_active_by_user_id(user.id, now)

    async def _matches(self, otp: str, challenge: PasswordReset) -> bool:
        try:
            return await self.hasher.verify(otp, challenge.otp_hash)
        except ValueError:
            logger.warning("Skipping reset challenge %s with malformed hash", challenge.id)
            return False

    async def execute(self, otp: str, email: Optional[str] = None) -> Result[ConfirmOtpResponse]:
        """
        Execute confirm OTP use case.

        Args:
            otp: Six digit code from the email
            email: Optional address scoping the lookup to one user

        Returns:
            Result with the reset token, or INVALID_OTP
        """
        async with self.uow:
            matched = None
            for challenge in await self._candidates(email):
                if await self._matches(otp, challenge):
                    matched = challenge
                    break

            if matched is None:
                return Return.err(
                    Error(ErrorCode.INVALID_OTP.value, "Invalid or expired OTP code.")
                )

            reset_token = self.tokens.issue(matched.user_id, TokenPurpose.password_reset)

            logger.info("OTP confirmed for user %s", matched.user_id)
            return Return.ok(
                ConfirmOtpResponse(
                    message="OTP confirmed. Use the reset token to set a new password.",
                    reset_token=reset_token,
                )
            )
