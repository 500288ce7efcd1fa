"""
Get Employees Use Case

Read access to employee records.
"""

from typing import List

from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.libs.result import Error, Result, Return
from .dtos import EmployeeResponse


class GetEmployeesUseCase:
    """Use case for listing employees and fetching one by ID"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def list_all(self) -> Result[List[EmployeeResponse]]:
        """All employees ordered by ID ascending"""
        async with self.uow:
            employees = await self.uow.employees.list_all()
            return Return.ok([EmployeeResponse.from_entity(e) for e in employees])

    async def get_by_id(self, employee_id: int) -> Result[EmployeeResponse]:
        async with self.uow:
            employee = await self.uow.employees.get_by_id(employee_id)
            if employee is None:
                return Return.err(
                    Error(ErrorCode.EMPLOYEE_NOT_FOUND.value, "Employee not found")
                )
            return Return.ok(EmployeeResponse.from_entity(employee))
