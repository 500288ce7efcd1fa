import pytest
from httpx import AsyncClient
from sqlmodel import select

from staffdesk.domain.entities import PasswordReset, User


@pytest.mark.asyncio
async def test_change_password(client: AsyncClient, auth_headers, test_data):
    user = test_data.get_copy("user")

    response = await client.post(
        "/change-password",
        json={
            "oldPassword": user["password"],
            "confirmOldPassword": user["password"],
            "newPassword": "secret2",
        },
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Password has been successfully changed."}

    response = await client.post(
        "/login", json={"email": user["email"], "password": "secret2"}
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_change_password_old_passwords_differ(client: AsyncClient, auth_headers, test_data):
    """Mismatch is reported even when the first old password is correct"""
    user = test_data.get_copy("user")

    response = await client.post(
        "/change-password",
        json={
            "old_password": user["password"],
            "confirm_old_password": "different",
            "new_password": "secret2",
        },
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "PASSWORD_MISMATCH",
        "message": "Old passwords do not match.",
    }


@pytest.mark.asyncio
async def test_change_password_wrong_old_password(client: AsyncClient, auth_headers):
    response = await client.post(
        "/change-password",
        json={
            "old_password": "wrong12",
            "confirm_old_password": "wrong12",
            "new_password": "secret2",
        },
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INCORRECT_PASSWORD"


@pytest.mark.asyncio
async def test_change_password_requires_auth(client: AsyncClient):
    response = await client.post(
        "/change-password",
        json={
            "old_password": "secret1",
            "confirm_old_password": "secret1",
            "new_password": "secret2",
        },
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_delete_account(client: AsyncClient, auth_headers, db_session, test_data):
    """Delete Account

    Given alice is logged in with a pending password reset
    When she deletes her account
    Then the user and the reset challenge are gone
    And her token no longer resolves to an account
    And logging in with her old credentials fails
    """
    user = test_data.get_copy("user")
    await client.post("/forgot-password", json={"email": user["email"]})

    response = await client.delete("/delete-account", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Account has been successfully deleted."}

    users = await db_session.exec(select(User))
    assert users.all() == []
    challenges = await db_session.exec(select(PasswordReset))
    assert challenges.all() == []

    response = await client.delete("/delete-account", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"

    response = await client.post(
        "/login", json={"email": user["email"], "password": user["password"]}
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"
