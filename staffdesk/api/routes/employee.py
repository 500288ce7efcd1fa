from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status
from pydantic import EmailStr, Field

from staffdesk.api.error import ClientError, ServerError
from staffdesk.api.routes.auth import RequestModel
from staffdesk.app.services.unit_of_work import UnitOfWork
from staffdesk.app.use_cases.auth import MessageResponse
from staffdesk.app.use_cases.employees import (
    CreateEmployeeCommand,
    CreateEmployeeUseCase,
    DeleteEmployeeUseCase,
    EmployeeResponse,
    GetEmployeesUseCase,
    UpdateEmployeeCommand,
    UpdateEmployeeUseCase,
)
from staffdesk.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/employees", tags=["Employees"])


class CreateEmployeeRequest(RequestModel):
    """Create employee HTTP request payload"""

    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., max_length=100)
    phone_number: Optional[str] = Field(None, max_length=20)
    hire_date: datetime
    job_title: Optional[str] = Field(None, max_length=100)
    department: Optional[str] = Field(None, max_length=100)
    salary: Optional[float] = Field(None, ge=0)


class UpdateEmployeeRequest(RequestModel):
    """Update employee HTTP request payload - every field optional"""

    first_name: Optional[str] = Field(None, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, max_length=20)
    hire_date: Optional[datetime] = None
    job_title: Optional[str] = Field(None, max_length=100)
    department: Optional[str] = Field(None, max_length=100)
    salary: Optional[float] = Field(None, ge=0)


def _raise_for_error(error):
    if error.code == "EMPLOYEE_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code == "EMPLOYEE_EMAIL_EXISTS":
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[EmployeeResponse])
async def list_employees(
    _user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List all employees ordered by ID"""
    result = await GetEmployeesUseCase(uow).list_all()

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/{employee_id}", status_code=status.HTTP_200_OK, response_model=EmployeeResponse)
async def get_employee(
    employee_id: int = Path(..., gt=0),
    _user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get one employee

    Raises:
        - 404 Not Found: No employee with this ID
    """
    result = await GetEmployeesUseCase(uow).get_by_id(employee_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EmployeeResponse)
async def create_employee(
    request: CreateEmployeeRequest,
    _user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create an employee

    Raises:
        - 409 Conflict: Email already used by another employee
    """
    command = CreateEmployeeCommand(**request.model_dump())

    result = await CreateEmployeeUseCase(uow).execute(command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.put("/{employee_id}", status_code=status.HTTP_200_OK, response_model=EmployeeResponse)
async def update_employee(
    request: UpdateEmployeeRequest,
    employee_id: int = Path(..., gt=0),
    _user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update an employee

    Only the fields sent in the body are applied.

    Raises:
        - 404 Not Found: No employee with this ID
        - 409 Conflict: Email already used by another employee
    """
    command = UpdateEmployeeCommand(**request.model_dump(exclude_unset=True))

    result = await UpdateEmployeeUseCase(uow).execute(employee_id, command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.delete("/{employee_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_employee(
    employee_id: int = Path(..., gt=0),
    _user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete an employee

    Raises:
        - 404 Not Found: No employee with this ID
    """
    result = await DeleteEmployeeUseCase(uow).execute(employee_id)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value
