from abc import ABC, abstractmethod

from staffdesk.app.repositories.employee_repository import IEmployeeRepository
from staffdesk.app.repositories.password_reset_repository import IPasswordResetRepository
from staffdesk.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    password_resets: IPasswordResetRepository
    employees: IEmployeeRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
