"""
User Use Cases

Account management for authenticated users.
"""

from .change_password_use_case import ChangePasswordUseCase
from .delete_account_use_case import DeleteAccountUseCase

__all__ = [
    "ChangePasswordUseCase",
    "DeleteAccountUseCase",
]
