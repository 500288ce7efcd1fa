"""
Delete Account Use Case

Removes the authenticated user's account.
"""

import logging
from uuid import UUID

from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.auth.dtos import MessageResponse
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """
    Use case for account deletion.

    Business Rules:
    - Pending password reset is deleted before the user row
    - Both deletions commit in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND.value, "User not found."))

            await self.uow.password_resets.delete_by_user_id(user.id)
            await self.uow.users.delete(user)

            await self.uow.commit()

            logger.info("Deleted account %s", user_id)
            return Return.ok(
                MessageResponse(message="Account has been successfully deleted.")
            )
