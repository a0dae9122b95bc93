import pytest
from httpx import AsyncClient

from tests.utils.api_helpers import bearer, register


@pytest.mark.asyncio
async def test_update_password_flow(client: AsyncClient, test_data):
    """
    Given I am logged in
    When I change my password with a wrong current password
    Then I get 401
    When I change it with the right current password
    Then login works with the new password and not with the old one
    """
    token = await register(client, test_data.get_copy("register_request"))

    wrong = await client.post(
        "/api/update-password",
        json={"old_password": "not-my-password", "new_password": "password2"},
        headers=bearer(token),
    )
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_OLD_PASSWORD"

    ok = await client.post(
        "/api/update-password",
        json={"old_password": "password1", "new_password": "password2"},
        headers=bearer(token),
    )
    assert ok.status_code == 200
    assert ok.json() == {"message": "Password updated successfully"}

    new_login = await client.post(
        "/auth/login", json={"email": "a@x.com", "password": "password2"}
    )
    old_login = await client.post(
        "/auth/login", json={"email": "a@x.com", "password": "password1"}
    )
    assert new_login.status_code == 200
    assert old_login.status_code == 401


@pytest.mark.asyncio
async def test_update_password_enforces_registration_minimum(client: AsyncClient, test_data):
    token = await register(client, test_data.get_copy("register_request"))

    response = await client.post(
        "/api/update-password",
        json={"old_password": "password1", "new_password": "sixsix"},
        headers=bearer(token),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_PASSWORD"


@pytest.mark.asyncio
async def test_update_password_requires_token(client: AsyncClient):
    response = await client.post(
        "/api/update-password",
        json={"old_password": "password1", "new_password": "password2"},
    )

    assert response.status_code == 401
