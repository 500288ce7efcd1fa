from datetime import timedelta
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from staffdesk.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from staffdesk.api.error import ClientError
from staffdesk.app.services.notifier import INotifier
from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.token_service import InvalidTokenError, TokenPurpose, TokenService
from staffdesk.app.use_cases.errors import ErrorCode
from staffdesk.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_notifier(request: Request) -> INotifier:
    return request.app.state.notifier


def get_otp_ttl(request: Request) -> timedelta:
    return request.app.state.otp_ttl


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> UUID:
    """
    Dependency to extract and verify the session JWT from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header
        tokens: Token service holding the session secret

    Returns:
        ID of the authenticated user

    Raises:
        ClientError: 401 if the header is missing or the token is invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise ClientError(
            Error("UNAUTHORIZED", "Authorization header missing."),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        payload = tokens.verify(credentials.credentials, TokenPurpose.session)
    except InvalidTokenError:
        raise ClientError(
            Error(ErrorCode.INVALID_TOKEN.value, "Invalid or expired token."),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return UUID(payload["user_id"])
