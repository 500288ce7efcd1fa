"""
Employee Use Cases

CRUD over employee records.
"""

from .get_employees_use_case import GetEmployeesUseCase
from .create_employee_use_case import CreateEmployeeUseCase
from .update_employee_use_case import UpdateEmployeeUseCase
from .delete_employee_use_case import DeleteEmployeeUseCase
from .dtos import CreateEmployeeCommand, UpdateEmployeeCommand, EmployeeResponse

__all__ = [
    # Use Cases
    "GetEmployeesUseCase",
    "CreateEmployeeUseCase",
    "UpdateEmployeeUseCase",
    "DeleteEmployeeUseCase",
    # DTOs
    "CreateEmployeeCommand",
    "UpdateEmployeeCommand",
    "EmployeeResponse",
]
