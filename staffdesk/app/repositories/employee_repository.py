from abc import ABC, abstractmethod
from typing import List, Optional

from staffdesk.domain.entities import Employee


class IEmployeeRepository(ABC):
    """Employee repository interface - application layer"""

    @abstractmethod
    async def list_all(self) -> List[Employee]:
        """Get all employees ordered by ID"""
        pass

    @abstractmethod
    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Get employee by ID"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Employee]:
        """Get employee by email address"""
        pass

    @abstractmethod
    async def create(self, employee: Employee) -> Employee:
        """Create a new employee; raises UniqueConstraintError on a taken email"""
        pass

    @abstractmethod
    async def update(self, employee: Employee) -> Employee:
        """Update existing employee; raises UniqueConstraintError on a taken email"""
        pass

    @abstractmethod
    async def delete(self, employee: Employee) -> None:
        """Delete employee"""
        pass
