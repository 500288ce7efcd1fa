"""
Employee Entity

Staff record managed by authenticated users.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from staffdesk.domain.base import utcnow


class Employee(SQLModel, table=True):
    """
    Employee entity - a staff member's contact and job details.

    Business Rules:
    - Email must be unique across all employees
    - Salary, when present, is never negative
    """

    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)
    email: str = Field(unique=True, index=True, max_length=100)
    phone_number: Optional[str] = Field(default=None, max_length=20)
    hire_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    job_title: Optional[str] = Field(default=None, max_length=100)
    department: Optional[str] = Field(default=None, max_length=100)
    salary: Optional[float] = Field(default=None, ge=0)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
