"""
Login Use Case

Authenticates a user and returns a session JWT.
"""

import logging

from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.token_service import TokenPurpose, TokenService
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.libs.result import Error, Result, Return
from .dtos import LoginResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password return the same error
    - A bcrypt check runs even when the user is missing, so timing does not
      reveal which emails are registered
    - Session token carries only the user id
    """

    def __init__(self, uow: UnitOfWork, tokens: TokenService, hasher: PasswordHasher):
        self.uow = uow
        self.tokens = tokens
        self.hasher = hasher

    def _invalid_credentials(self) -> Result[LoginResponse]:
        return Return.err(
            Error(ErrorCode.INVALID_CREDENTIALS.value, INVALID_CREDENTIALS_MESSAGE)
        )

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the session token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                await self.hasher.verify_dummy()
                return self._invalid_credentials()

            if not await self.hasher.verify(password, user.password_hash):
                logger.warning("Failed login for user %s", user.id)
                return self._invalid_credentials()

            token = self.tokens.issue(user.id, TokenPurpose.session)

            return Return.ok(LoginResponse(token=token))
