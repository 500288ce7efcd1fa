"""
Employee Use Case DTOs (Data Transfer Objects)

Command and Response classes for employee records.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from staffdesk.domain.entities import Employee


class CreateEmployeeCommand(BaseModel):
    """Command to create an employee"""

    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    hire_date: datetime
    job_title: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[float] = None


class UpdateEmployeeCommand(BaseModel):
    """
    Command to update an employee.

    Only the fields set on the command are considered. Empty names, email
    and hire date keep the stored value; the optional fields are overwritten
    whenever they are set, explicit None included.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    hire_date: Optional[datetime] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[float] = None


class EmployeeResponse(BaseModel):
    """Employee record returned to callers"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    hire_date: datetime
    job_title: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[float] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls.model_validate(employee)
