"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Command to register a new account"""

    username: str
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class MessageResponse(BaseModel):
    """Plain acknowledgment"""

    message: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    token: str


class ConfirmOtpResponse(BaseModel):
    """Response for OTP confirmation use case"""

    message: str
    reset_token: str
