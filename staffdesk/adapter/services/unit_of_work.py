from sqlmodel.ext.asyncio.session import AsyncSession

from staffdesk.adapter.repositories.employee_repository import EmployeeRepository
from staffdesk.adapter.repositories.password_reset_repository import PasswordResetRepository
from staffdesk.adapter.repositories.user_repository import UserRepository
from staffdesk.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.password_resets = PasswordResetRepository(self.session)
        self.employees = EmployeeRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
