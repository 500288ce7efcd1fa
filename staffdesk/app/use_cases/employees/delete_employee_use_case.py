"""
Delete Employee Use Case
"""

from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.auth.dtos import MessageResponse
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.libs.result import Error, Result, Return


class DeleteEmployeeUseCase:
    """Use case for deleting an employee"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, employee_id: int) -> Result[MessageResponse]:
        async with self.uow:
            employee = await self.uow.employees.get_by_id(employee_id)
            if employee is None:
                return Return.err(
                    Error(ErrorCode.EMPLOYEE_NOT_FOUND.value, "Employee not found")
                )

            await self.uow.employees.delete(employee)

            await self.uow.commit()

            return Return.ok(MessageResponse(message="Employee deleted successfully"))
