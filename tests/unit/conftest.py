import pytest
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.token_service import TokenService


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email_or_username = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()

    uow.password_resets = MagicMock()
    uow.password_resets.upsert = AsyncMock()
    uow.password_resets.get_active = AsyncMock(return_value=[])
    uow.password_resets.get_active_by_user_id = AsyncMock(return_value=[])
    uow.password_resets.delete_by_user_id = AsyncMock(return_value=0)

    uow.employees = MagicMock()
    uow.employees.list_all = AsyncMock(return_value=[])
    uow.employees.get_by_id = AsyncMock(return_value=None)
    uow.employees.get_by_email = AsyncMock(return_value=None)
    uow.employees.create = AsyncMock()
    uow.employees.update = AsyncMock(side_effect=lambda employee: employee)
    uow.employees.delete = AsyncMock()

    return uow


@pytest.fixture
def hasher():
    """Minimum bcrypt cost keeps the suite fast"""
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return TokenService(
        session_secret="unit-session-secret",
        reset_secret="unit-reset-secret",
        session_ttl=timedelta(hours=1),
        reset_ttl=timedelta(minutes=15),
    )
