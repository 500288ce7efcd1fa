"""
Error codes returned by use cases.

The API layer maps each code to an HTTP status.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable failure kinds"""

    # Accounts
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_NOT_REGISTERED = "EMAIL_NOT_REGISTERED"
    EMAIL_DELIVERY_FAILED = "EMAIL_DELIVERY_FAILED"
    INVALID_OTP = "INVALID_OTP"
    INVALID_TOKEN = "INVALID_TOKEN"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"

    # Employees
    EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"
    EMPLOYEE_EMAIL_EXISTS = "EMPLOYEE_EMAIL_EXISTS"
