"""
Create Employee Use Case
"""

from staffdesk.app.repositories.errors import UniqueConstraintError
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.domain.base import to_naive_utc
from staffdesk.domain.entities import Employee
from staffdesk.libs.result import Error, Result, Return
from .dtos import CreateEmployeeCommand, EmployeeResponse


def email_conflict() -> Result[EmployeeResponse]:
    return Return.err(Error(ErrorCode.EMPLOYEE_EMAIL_EXISTS.value, "Email already exists"))


class CreateEmployeeUseCase:
    """
    Use case for creating an employee.

    Business Rules:
    - Employee email must be unique
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateEmployeeCommand) -> Result[EmployeeResponse]:
        async with self.uow:
            if await self.uow.employees.get_by_email(command.email) is not None:
                return email_conflict()

            employee = Employee(
                first_name=command.first_name,
                last_name=command.last_name,
                email=command.email,
                phone_number=command.phone_number,
                hire_date=to_naive_utc(command.hire_date),
                job_title=command.job_title,
                department=command.department,
                salary=command.salary,
            )
            try:
                employee = await self.uow.employees.create(employee)
            except UniqueConstraintError:
                return email_conflict()

            await self.uow.commit()

            return Return.ok(EmployeeResponse.from_entity(employee))
