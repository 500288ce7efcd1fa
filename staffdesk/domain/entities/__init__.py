"""
Staffdesk Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .user import User
from .password_reset import PasswordReset
from .employee import Employee

__all__ = [
    "User",
    "PasswordReset",
    "Employee",
]
