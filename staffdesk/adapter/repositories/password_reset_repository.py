from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from sqlalchemy import delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from staffdesk.app.repositories.password_reset_repository import IPasswordResetRepository
from staffdesk.domain.base import utcnow
from staffdesk.domain.entities import PasswordReset

# Dialects with INSERT ... ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class PasswordResetRepository(IPasswordResetRepository):
    """PasswordReset repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def upsert(self, user_id: UUID, otp_hash: str, expires_at: datetime) -> PasswordReset:
        """
        Create the user's reset challenge, or overwrite the existing one.

        Runs as a single INSERT ... ON CONFLICT (user_id) DO UPDATE, so two
        concurrent requests for the same user never collide on the unique
        user_id; the last writer wins.
        """
        dialect = self.session.get_bind().dialect.name
        insert = UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Reset challenge upsert is not supported on {dialect}")

        stmt = insert(PasswordReset).values(
            id=uuid4(),
            user_id=user_id,
            otp_hash=otp_hash,
            expires_at=expires_at,
            created_at=utcnow(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_={"otp_hash": stmt.excluded.otp_hash, "expires_at": stmt.excluded.expires_at},
        )
        await self.session.execute(stmt)

        # Bypass the identity map, which may hold the row as it was before
        result = await self.session.exec(
            select(PasswordReset)
            .where(PasswordReset.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.one()

    async def get_active(self, now: datetime) -> List[PasswordReset]:
        """Get all challenges expiring strictly after now"""
        stmt = select(PasswordReset).where(PasswordReset.expires_at > now)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_active_by_user_id(self, user_id: UUID, now: datetime) -> List[PasswordReset]:
        """Get the user's challenge if it expires strictly after now"""
        stmt = select(PasswordReset).where(
            PasswordReset.user_id == user_id,
            PasswordReset.expires_at > now,
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete the user's challenge, returning the number of rows removed"""
        stmt = delete(PasswordReset).where(PasswordReset.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
