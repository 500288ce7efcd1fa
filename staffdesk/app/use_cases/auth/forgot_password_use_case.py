"""
Forgot Password Use Case

Issues a one-time code for password recovery and emails it to the user.
"""

import logging
import secrets
from datetime import timedelta

from staffdesk.app.services.notifier import INotifier, NotificationError
from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.domain.base import utcnow
from staffdesk.libs.result import Error, Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

OTP_EMAIL_SUBJECT = "OTP Code for Password Reset"
OTP_EMAIL_BODY = "Your OTP code is: {otp}. This code is valid for {minutes} minutes."


def generate_otp() -> str:
    """Six digit code drawn uniformly from 100000-999999"""
    return str(100000 + secrets.randbelow(900000))


class ForgotPasswordUseCase:
    """
    Use case for starting a password reset.

    Business Rules:
    - Email must belong to a registered user
    - OTP is hashed with bcrypt before it is stored
    - One challenge per user; a new request replaces the previous one
    - Challenge expires 10 minutes after issuance
    - Challenge is only committed once the email has been handed off
    - The OTP itself is never returned or logged
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: INotifier,
        hasher: PasswordHasher,
        otp_ttl: timedelta = timedelta(minutes=10),
    ):
        self.uow = uow
        self.notifier = notifier
        self.hasher = hasher
        self.otp_ttl = otp_ttl

    async def execute(self, email: str) -> Result[MessageResponse]:
        """
        Execute forgot password use case.

        Args:
            email: Registered email address

        Returns:
            Result with acknowledgment, or EMAIL_NOT_REGISTERED /
            EMAIL_DELIVERY_FAILED
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(
                    Error(ErrorCode.EMAIL_NOT_REGISTERED.value, "Email is not registered.")
                )

            otp = generate_otp()
            otp_hash = await self.hasher.hash(otp)
            expires_at = utcnow() + self.otp_ttl

            await self.uow.password_resets.upsert(user.id, otp_hash, expires_at)

            minutes = int(self.otp_ttl.total_seconds() // 60)
            try:
                await self.notifier.send(
                    user.email,
                    OTP_EMAIL_SUBJECT,
                    OTP_EMAIL_BODY.format(otp=otp, minutes=minutes),
                )
            except NotificationError:
                return Return.err(
                    Error(
                        ErrorCode.EMAIL_DELIVERY_FAILED.value,
                        "Could not send the OTP code. Please try again later.",
                    )
                )

            await self.uow.commit()

            logger.info("Password reset requested for user %s", user.id)
            return Return.ok(
                MessageResponse(message="OTP code has been sent to your email.")
            )
