"""
User Entity

Represents an account holder that can log in and manage employees.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from staffdesk.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - an account identified by a unique username and email.

    Business Rules:
    - Username and email are each unique across all users
    - Password stored as bcrypt hash, never plaintext
    - Deleting a user removes its pending password reset first
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, min_length=1, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
