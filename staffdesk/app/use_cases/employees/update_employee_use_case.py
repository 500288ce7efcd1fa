"""
Update Employee Use Case

Partial update of an employee record.
"""

from staffdesk.app.repositories.errors import UniqueConstraintError
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.domain.base import to_naive_utc, utcnow
from staffdesk.libs.result import Error, Result, Return
from .create_employee_use_case import email_conflict
from .dtos import EmployeeResponse, UpdateEmployeeCommand

# Blank values keep the stored value
REQUIRED_FIELDS = ("first_name", "last_name", "email")
# Overwritten whenever present in the request, None included
OPTIONAL_FIELDS = ("phone_number", "job_title", "department", "salary")


class UpdateEmployeeUseCase:
    """
    Use case for updating an employee.

    Business Rules:
    - Employee must exist
    - A changed email must not belong to another employee
    - Omitted fields are left untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, employee_id: int, command: UpdateEmployeeCommand
    ) -> Result[EmployeeResponse]:
        async with self.uow:
            employee = await self.uow.employees.get_by_id(employee_id)
            if employee is None:
                return Return.err(
                    Error(ErrorCode.EMPLOYEE_NOT_FOUND.value, "Employee not found")
                )

            if command.email and command.email != employee.email:
                other = await self.uow.employees.get_by_email(command.email)
                if other is not None and other.id != employee.id:
                    return email_conflict()

            for field in REQUIRED_FIELDS:
                value = getattr(command, field)
                if value:
                    setattr(employee, field, value)

            if command.hire_date:
                employee.hire_date = to_naive_utc(command.hire_date)

            for field in OPTIONAL_FIELDS:
                if field in command.model_fields_set:
                    setattr(employee, field, getattr(command, field))

            employee.updated_at = utcnow()
            try:
                employee = await self.uow.employees.update(employee)
            except UniqueConstraintError:
                return email_conflict()

            await self.uow.commit()

            return Return.ok(EmployeeResponse.from_entity(employee))
