"""
Authentication Use Cases

Registration, login and the OTP password reset flow.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .confirm_otp_use_case import ConfirmOtpUseCase
from .set_new_password_use_case import SetNewPasswordUseCase
from .dtos import (
    RegisterCommand,
    MessageResponse,
    LoginResponse,
    ConfirmOtpResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "ConfirmOtpUseCase",
    "SetNewPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "MessageResponse",
    "LoginResponse",
    "ConfirmOtpResponse",
]
