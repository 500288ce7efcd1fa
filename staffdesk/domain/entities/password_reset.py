"""
PasswordReset Entity

One in-flight password reset challenge per user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from staffdesk.domain.base import utcnow


class PasswordReset(SQLModel, table=True):
    """
    PasswordReset entity - pending OTP challenge for a user.

    Business Rules:
    - At most one row per user; a new request overwrites the old one
    - OTP is stored as a bcrypt hash, exactly like a password
    - Expires 10 minutes after issuance; expired rows are ignored, not swept
    - Deleted once the new password is set or the account is removed
    """

    __tablename__ = "password_resets"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", unique=True, nullable=False)
    otp_hash: str = Field(max_length=60)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_password_reset_expires_at", "expires_at"),)
