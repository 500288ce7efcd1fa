"""
Register Use Case

Creates a new account from a username, email and password.
"""

import logging

from staffdesk.app.repositories.errors import UniqueConstraintError
from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.domain.entities import User
from staffdesk.libs.result import Error, Result, Return
from .dtos import MessageResponse, RegisterCommand

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Use case for account registration.

    Business Rules:
    - Username and email are checked together; either one taken is a conflict
    - Password is stored as a bcrypt hash
    - No token is issued; the user logs in separately
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    def _conflict(self) -> Result[MessageResponse]:
        return Return.err(
            Error(ErrorCode.USER_ALREADY_EXISTS.value, "Username or email is already in use.")
        )

    async def execute(self, command: RegisterCommand) -> Result[MessageResponse]:
        """
        Execute registration use case.

        Args:
            command: RegisterCommand with username, email, password

        Returns:
            Result with acknowledgment, or USER_ALREADY_EXISTS
        """
        async with self.uow:
            existing = await self.uow.users.get_by_email_or_username(
                command.email, command.username
            )
            if existing is not None:
                return self._conflict()

            password_hash = await self.hasher.hash(command.password)

            user = User(
                username=command.username,
                email=command.email,
                password_hash=password_hash,
            )
            try:
                user = await self.uow.users.create(user)
            except UniqueConstraintError:
                # Lost a race with a concurrent registration
                return self._conflict()

            await self.uow.commit()

            logger.info("Registered user %s", user.id)
            return Return.ok(MessageResponse(message="User successfully registered."))
