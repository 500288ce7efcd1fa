from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from staffdesk.api.error import ClientError, ServerError
from staffdesk.app.services.notifier import INotifier
from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.token_service import TokenService
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.auth import (
    RegisterCommand,
    RegisterUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    ConfirmOtpUseCase,
    SetNewPasswordUseCase,
    MessageResponse,
    LoginResponse,
    ConfirmOtpResponse,
)
from staffdesk.depends import (
    get_notifier,
    get_otp_ttl,
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(tags=["Authentication"])


class RequestModel(BaseModel):
    """Accepts both snake_case and camelCase field names"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(RequestModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    username: str = Field(..., min_length=3, max_length=255, description="Unique username")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=6, description="User password (min 6 chars)")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Register a new account

    Raises:
        - 409 Conflict: Username or email already in use
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        username=request.username, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "USER_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(RequestModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    User Login

    Returns a session JWT valid for one hour.

    Raises:
        - 401 Unauthorized: Invalid credentials (unknown email or wrong password)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, tokens, hasher)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(RequestModel):
    """Forgot password HTTP request payload"""

    email: EmailStr = Field(..., description="Registered email address")


@router.post("/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotifier = Depends(get_notifier),
    hasher: PasswordHasher = Depends(get_password_hasher),
    otp_ttl: timedelta = Depends(get_otp_ttl),
):
    """
    Forgot Password

    Emails a 6-digit OTP valid for 10 minutes. A repeated request replaces
    the previous code.

    Raises:
        - 404 Not Found: Email is not registered
        - 500 Internal Server Error: Email delivery or server error
    """
    use_case = ForgotPasswordUseCase(uow, notifier, hasher, otp_ttl=otp_ttl)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_NOT_REGISTERED":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ConfirmOtpRequest(RequestModel):
    """
    Confirm OTP HTTP request payload

    Email is optional; when given, only that account's code is checked.
    """

    otp: str = Field(..., pattern=r"^\d{6}$", description="6-digit OTP code")
    email: Optional[EmailStr] = Field(None, description="Email the OTP was sent to")


@router.post("/confirm-otp", status_code=status.HTTP_200_OK, response_model=ConfirmOtpResponse)
async def confirm_otp(
    request: ConfirmOtpRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Confirm OTP

    Exchanges a valid OTP for a reset token valid for 15 minutes.

    Raises:
        - 400 Bad Request: Invalid or expired OTP
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmOtpUseCase(uow, tokens, hasher)
    result = await use_case.execute(request.otp, email=request.email)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_OTP":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class SetNewPasswordRequest(RequestModel):
    """Set new password HTTP request payload"""

    reset_token: str = Field(..., min_length=1, description="Reset token from confirm-otp")
    new_password: str = Field(..., min_length=6, description="New password (min 6 chars)")


@router.post("/set-new-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def set_new_password(
    request: SetNewPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: TokenService = Depends(get_token_service),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Set New Password

    Raises:
        - 400 Bad Request: Invalid or expired reset token
        - 404 Not Found: User no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = SetNewPasswordUseCase(uow, tokens, hasher)
    result = await use_case.execute(request.reset_token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
