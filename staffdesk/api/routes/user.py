from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import Field

from staffdesk.api.error import ClientError, ServerError
from staffdesk.api.routes.auth import RequestModel
from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.auth import MessageResponse
from staffdesk.app.use_cases.users import ChangePasswordUseCase, DeleteAccountUseCase
from staffdesk.depends import get_current_user_id, get_password_hasher, get_unit_of_work

router = APIRouter(tags=["User"])


class ChangePasswordRequest(RequestModel):
    """Change password HTTP request payload"""

    old_password: str = Field(..., min_length=6)
    confirm_old_password: str = Field(..., min_length=6)
    new_password: str = Field(..., min_length=6)


@router.post("/change-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Change Password

    Raises:
        - 400 Bad Request: Old passwords differ, or old password is wrong
        - 401 Unauthorized: Missing, invalid or expired session token
        - 404 Not Found: User no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = ChangePasswordUseCase(uow, hasher)
    result = await use_case.execute(
        user_id,
        request.old_password,
        request.confirm_old_password,
        request.new_password,
    )

    if result.is_err():
        error = result.error
        if error.code in ("PASSWORD_MISMATCH", "INCORRECT_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete("/delete-account", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_account(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Account

    Removes the user and any pending password reset.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired session token
        - 404 Not Found: User no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = DeleteAccountUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
