from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from staffdesk.app.repositories.errors import UniqueConstraintError


async def flush_unique(session: AsyncSession) -> None:
    """
    Flush pending writes, translating a unique-constraint violation.

    A concurrent writer may commit the same unique value between our
    existence check and this flush. The session must be rolled back
    afterwards; the unit of work does that on exit.
    """
    try:
        await session.flush()
    except IntegrityError as exc:
        raise UniqueConstraintError(str(exc.orig)) from exc
