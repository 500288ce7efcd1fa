from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from staffdesk.adapter.repositories.session_utils import flush_unique
from staffdesk.app.repositories.employee_repository import IEmployeeRepository
from staffdesk.domain.entities import Employee


class EmployeeRepository(IEmployeeRepository):
    """Employee repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Employee]:
        """Get all employees ordered by ID"""
        stmt = select(Employee).order_by(Employee.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Get employee by ID"""
        stmt = select(Employee).where(Employee.id == employee_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[Employee]:
        """Get employee by email address"""
        stmt = select(Employee).where(Employee.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, employee: Employee) -> Employee:
        """Create a new employee"""
        self.session.add(employee)
        await flush_unique(self.session)
        await self.session.refresh(employee)
        return employee

    async def update(self, employee: Employee) -> Employee:
        """Update existing employee"""
        self.session.add(employee)
        await flush_unique(self.session)
        await self.session.refresh(employee)
        return employee

    async def delete(self, employee: Employee) -> None:
        """Delete employee"""
        await self.session.delete(employee)
        await self.session.flush()
