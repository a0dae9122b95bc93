import pytest
from httpx import AsyncClient

from tests.utils.api_helpers import bearer


@pytest.mark.asyncio
async def test_register_login_change_password_walkthrough(client: AsyncClient):
    account = {"email": "a@x.com", "username": "a", "password": "password1"}

    registered = await client.post("/auth/register", json=account)
    assert registered.status_code == 200
    first_token = registered.json()["token"]

    duplicate = await client.post("/auth/register", json=account)
    assert duplicate.status_code == 409

    login = await client.post("/auth/login", json={"email": "a@x.com", "password": "password1"})
    assert login.status_code == 200
    token = login.json()["token"]
    assert token

    bad_login = await client.post("/auth/login", json={"email": "a@x.com", "password": "wrong-pass"})
    assert bad_login.status_code == 401
    assert bad_login.json()["error"]["message"] == "Login or password is incorrect"

    wrong_old = await client.post(
        "/api/update-password",
        json={"old_password": "wrong-pass", "new_password": "password2"},
        headers=bearer(token),
    )
    assert wrong_old.status_code == 401

    changed = await client.post(
        "/api/update-password",
        json={"old_password": "password1", "new_password": "password2"},
        headers=bearer(first_token),
    )
    assert changed.status_code == 200

    assert (
        await client.post("/auth/login", json={"email": "a@x.com", "password": "password2"})
    ).status_code == 200
    assert (
        await client.post("/auth/login", json={"email": "a@x.com", "password": "password1"})
    ).status_code == 401
