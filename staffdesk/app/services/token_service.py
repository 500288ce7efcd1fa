"""
Token Service

Signs and verifies the JWTs handed to clients. Session tokens and
password reset tokens use independent secrets so that one can never be
forged from, or replayed as, the other.
"""

from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt


class TokenPurpose(str, Enum):
    """What a token may be used for"""

    session = "session"
    password_reset = "password_reset"


class InvalidTokenError(Exception):
    """Token has a bad signature, is malformed, or has expired"""


def encode_token(
    claims: dict,
    secret: str,
    expires_delta: timedelta,
    algorithm: str = "HS256",
    now: Optional[datetime] = None,
) -> str:
    """
    Create a signed JWT with iat/exp claims

    Args:
        claims: Payload claims
        secret: Signing secret
        expires_delta: Token lifetime
        algorithm: HMAC algorithm
        now: Issue time, defaults to the current UTC time

    Returns:
        JWT token string
    """
    issued_at = now or datetime.now(UTC)
    payload = dict(claims)
    payload["iat"] = issued_at
    payload["exp"] = issued_at + expires_delta
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> dict:
    """
    Verify and decode a JWT

    Raises:
        InvalidTokenError: signature, format or expiry check failed
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError as exc:
        raise InvalidTokenError("Invalid or expired token") from exc


class TokenService:
    """Issues and verifies session and password reset tokens"""

    def __init__(
        self,
        session_secret: str,
        reset_secret: str,
        session_ttl: timedelta = timedelta(hours=1),
        reset_ttl: timedelta = timedelta(minutes=15),
        algorithm: str = "HS256",
    ):
        if session_secret == reset_secret:
            raise ValueError("Session and password reset secrets must differ")
        self._secrets = {
            TokenPurpose.session: session_secret,
            TokenPurpose.password_reset: reset_secret,
        }
        self._ttls = {
            TokenPurpose.session: session_ttl,
            TokenPurpose.password_reset: reset_ttl,
        }
        self.algorithm = algorithm

    @classmethod
    def from_config(cls, config) -> "TokenService":
        return cls(
            session_secret=config.JWT_SECRET,
            reset_secret=config.RESET_PASSWORD_SECRET,
            session_ttl=timedelta(minutes=config.SESSION_TOKEN_TTL_MINUTES),
            reset_ttl=timedelta(minutes=config.RESET_TOKEN_TTL_MINUTES),
            algorithm=config.JWT_ALGORITHM,
        )

    def issue(self, user_id: UUID, purpose: TokenPurpose, now: Optional[datetime] = None) -> str:
        claims = {"user_id": str(user_id), "purpose": purpose.value}
        return encode_token(
            claims,
            self._secrets[purpose],
            self._ttls[purpose],
            algorithm=self.algorithm,
            now=now,
        )

    def verify(self, token: str, purpose: TokenPurpose) -> dict:
        """
        Verify a token for the given purpose.

        Returns:
            Decoded payload; payload["user_id"] is the subject

        Raises:
            InvalidTokenError: for any failure, expiry included
        """
        payload = decode_token(token, self._secrets[purpose], algorithm=self.algorithm)
        if payload.get("purpose") != purpose.value or not payload.get("user_id"):
            raise InvalidTokenError("Invalid or expired token")
        try:
            UUID(payload["user_id"])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError("Invalid or expired token") from exc
        return payload
