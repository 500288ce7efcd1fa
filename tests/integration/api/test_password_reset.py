import re
from datetime import UTC, datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select

from staffdesk.app.services.token_service import TokenPurpose
from staffdesk.domain.base import utcnow
from staffdesk.domain.entities import PasswordReset, User

OTP_PATTERN = re.compile(r"Your OTP code is: (\d{6})")


async def request_otp(client, outbox, email):
    response = await client.post("/forgot-password", json={"email": email})
    assert response.status_code == 200
    return OTP_PATTERN.search(outbox.messages[-1].body).group(1)


@pytest.mark.asyncio
async def test_full_password_reset_flow(client: AsyncClient, outbox, db_session, test_data):
    """Forgot -> Confirm OTP -> Set New Password

    Given alice is registered
    When she requests an OTP, confirms it and sets a new password
    Then she can log in with the new password only
    And no reset challenge remains
    """
    user = test_data.get_copy("user")
    await client.post("/register", json=user)

    # Forgot password
    response = await client.post("/forgot-password", json={"email": user["email"]})
    assert response.status_code == 200
    assert response.json() == {"message": "OTP code has been sent to your email."}

    assert len(outbox.messages) == 1
    message = outbox.messages[0]
    assert message.recipient == user["email"]
    assert message.subject == "OTP Code for Password Reset"
    otp = OTP_PATTERN.search(message.body).group(1)
    assert otp not in response.text

    # Confirm OTP
    response = await client.post("/confirm-otp", json={"otp": otp})
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "OTP confirmed. Use the reset token to set a new password."
    reset_token = data["reset_token"]

    # Set new password (camelCase accepted)
    response = await client.post(
        "/set-new-password", json={"resetToken": reset_token, "newPassword": "brandnew1"}
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Password has been successfully reset."}

    result = await db_session.exec(select(PasswordReset))
    assert result.all() == []

    # The consumed OTP cannot be confirmed again
    response = await client.post("/confirm-otp", json={"otp": otp})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_OTP"

    old_login = await client.post(
        "/login", json={"email": user["email"], "password": user["password"]}
    )
    assert old_login.status_code == 401

    new_login = await client.post(
        "/login", json={"email": user["email"], "password": "brandnew1"}
    )
    assert new_login.status_code == 200


@pytest.mark.asyncio
async def test_forgot_password_unregistered_email(client: AsyncClient, outbox):
    response = await client.post("/forgot-password", json={"email": "nobody@x.com"})

    assert response.status_code == 404
    assert response.json()["error"] == {
        "code": "EMAIL_NOT_REGISTERED",
        "message": "Email is not registered.",
    }
    assert outbox.messages == []


@pytest.mark.asyncio
async def test_repeated_forgot_password_replaces_challenge(
    client: AsyncClient, outbox, db_session, test_data
):
    """Only the most recent OTP is accepted"""
    user = test_data.get_copy("user")
    await client.post("/register", json=user)

    first_otp = await request_otp(client, outbox, user["email"])
    second_otp = await request_otp(client, outbox, user["email"])

    result = await db_session.exec(select(PasswordReset))
    assert len(result.all()) == 1

    if first_otp != second_otp:
        response = await client.post("/confirm-otp", json={"otp": first_otp})
        assert response.status_code == 400

    response = await client.post("/confirm-otp", json={"otp": second_otp})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_confirm_otp_wrong_code(client: AsyncClient, outbox, test_data):
    user = test_data.get_copy("user")
    await client.post("/register", json=user)
    otp = await request_otp(client, outbox, user["email"])
    wrong = "100000" if otp != "100000" else "100001"

    response = await client.post("/confirm-otp", json={"otp": wrong})

    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "INVALID_OTP",
        "message": "Invalid or expired OTP code.",
    }


@pytest.mark.asyncio
async def test_confirm_otp_expired(client: AsyncClient, outbox, db_session, test_data):
    user = test_data.get_copy("user")
    await client.post("/register", json=user)
    otp = await request_otp(client, outbox, user["email"])

    result = await db_session.exec(select(PasswordReset))
    challenge = result.one()
    challenge.expires_at = utcnow() - timedelta(seconds=1)
    db_session.add(challenge)
    await db_session.commit()

    response = await client.post("/confirm-otp", json={"otp": otp})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_OTP"


@pytest.mark.asyncio
async def test_confirm_otp_scoped_to_email(client: AsyncClient, outbox, test_data):
    """An OTP sent to alice does not confirm when scoped to bob"""
    alice = test_data.get_copy("user")
    bob = test_data.get_copy("other_user")
    await client.post("/register", json=alice)
    await client.post("/register", json=bob)
    otp = await request_otp(client, outbox, alice["email"])

    response = await client.post("/confirm-otp", json={"otp": otp, "email": bob["email"]})
    assert response.status_code == 400

    response = await client.post("/confirm-otp", json={"otp": otp, "email": alice["email"]})
    assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("otp", ["12345", "1234567", "abcdef"])
async def test_confirm_otp_rejects_malformed_code(client: AsyncClient, otp):
    response = await client.post("/confirm-otp", json={"otp": otp})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_set_new_password_expired_token(app, client: AsyncClient, db_session, test_data):
    """Reset token older than its 15 minute lifetime is rejected"""
    user = test_data.get_copy("user")
    await client.post("/register", json=user)
    result = await db_session.exec(select(User).where(User.email == user["email"]))
    user_id = result.one().id

    issued = datetime.now(UTC) - timedelta(minutes=16)
    reset_token = app.state.token_service.issue(user_id, TokenPurpose.password_reset, now=issued)

    response = await client.post(
        "/set-new-password", json={"reset_token": reset_token, "new_password": "brandnew1"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "INVALID_TOKEN",
        "message": "Invalid or expired reset token.",
    }


@pytest.mark.asyncio
async def test_session_token_cannot_reset_password(client: AsyncClient, auth_headers):
    session_token = auth_headers["Authorization"].split(" ", 1)[1]

    response = await client.post(
        "/set-new-password", json={"reset_token": session_token, "new_password": "brandnew1"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TOKEN"
