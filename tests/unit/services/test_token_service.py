from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from staffdesk.app.services.token_service import (
    InvalidTokenError,
    TokenPurpose,
    TokenService,
    decode_token,
    encode_token,
)


def test_session_token_decodes_to_user_id(token_service):
    user_id = uuid4()

    token = token_service.issue(user_id, TokenPurpose.session)
    payload = token_service.verify(token, TokenPurpose.session)

    assert payload["user_id"] == str(user_id)
    assert payload["purpose"] == "session"
    assert payload["exp"] - payload["iat"] == 3600


def test_reset_token_lifetime_is_fifteen_minutes(token_service):
    token = token_service.issue(uuid4(), TokenPurpose.password_reset)
    payload = token_service.verify(token, TokenPurpose.password_reset)

    assert payload["exp"] - payload["iat"] == 15 * 60


def test_reset_token_is_not_a_session_token(token_service):
    token = token_service.issue(uuid4(), TokenPurpose.password_reset)

    with pytest.raises(InvalidTokenError):
        token_service.verify(token, TokenPurpose.session)


def test_session_token_is_not_a_reset_token(token_service):
    token = token_service.issue(uuid4(), TokenPurpose.session)

    with pytest.raises(InvalidTokenError):
        token_service.verify(token, TokenPurpose.password_reset)


def test_expired_reset_token_is_rejected(token_service):
    issued = datetime.now(UTC) - timedelta(minutes=15, seconds=1)
    token = token_service.issue(uuid4(), TokenPurpose.password_reset, now=issued)

    with pytest.raises(InvalidTokenError):
        token_service.verify(token, TokenPurpose.password_reset)


def test_tampered_token_is_rejected(token_service):
    token = token_service.issue(uuid4(), TokenPurpose.session)
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(InvalidTokenError):
        token_service.verify(tampered, TokenPurpose.session)


def test_garbage_token_is_rejected(token_service):
    with pytest.raises(InvalidTokenError):
        token_service.verify("not.a.jwt", TokenPurpose.session)


def test_token_without_purpose_is_rejected(token_service):
    token = encode_token(
        {"user_id": str(uuid4())}, "unit-session-secret", timedelta(minutes=5)
    )

    with pytest.raises(InvalidTokenError):
        token_service.verify(token, TokenPurpose.session)


def test_token_with_bad_user_id_is_rejected(token_service):
    token = encode_token(
        {"user_id": "alice", "purpose": "session"},
        "unit-session-secret",
        timedelta(minutes=5),
    )

    with pytest.raises(InvalidTokenError):
        token_service.verify(token, TokenPurpose.session)


def test_decode_token_with_wrong_secret():
    token = encode_token({"user_id": "1"}, "right", timedelta(minutes=5))

    assert decode_token(token, "right")["user_id"] == "1"
    with pytest.raises(InvalidTokenError):
        decode_token(token, "wrong")


def test_shared_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService(session_secret="same", reset_secret="same")


def test_from_config():
    class Config:
        JWT_SECRET = "s"
        RESET_PASSWORD_SECRET = "r"
        SESSION_TOKEN_TTL_MINUTES = 30
        RESET_TOKEN_TTL_MINUTES = 5
        JWT_ALGORITHM = "HS256"

    service = TokenService.from_config(Config)
    payload = service.verify(service.issue(uuid4(), TokenPurpose.session), TokenPurpose.session)

    assert payload["exp"] - payload["iat"] == 30 * 60
