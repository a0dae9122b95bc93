import pytest

from src.app.use_cases.auth import LoginUseCase
from src.domain.entities import User


@pytest.fixture
def existing_user(hasher):
    return User(
        id=3,
        username="alice",
        email="a@acme.com",
        password_hash=hasher.hash("password1"),
    )


@pytest.mark.asyncio
async def test_successful_login(mock_uow, hasher, tokens, existing_user):
    mock_uow.users.get_by_email.return_value = existing_user

    result = await LoginUseCase(mock_uow, hasher, tokens).execute("a@acme.com", "password1")

    assert result.is_ok()
    assert result.value.user.id == 3
    claims = tokens.verify(result.value.token)
    assert claims.user_id == 3
    assert claims.username == "alice"


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_email_look_the_same(
    mock_uow, hasher, tokens, existing_user
):
    use_case = LoginUseCase(mock_uow, hasher, tokens)

    mock_uow.users.get_by_email.return_value = existing_user
    wrong_password = await use_case.execute("a@acme.com", "password2")

    mock_uow.users.get_by_email.return_value = None
    unknown_email = await use_case.execute("nobody@acme.com", "password1")

    assert wrong_password.error.code == "INVALID_CREDENTIALS"
    assert wrong_password.error == unknown_email.error


@pytest.mark.asyncio
async def test_login_does_not_write(mock_uow, hasher, tokens, existing_user):
    mock_uow.users.get_by_email.return_value = existing_user

    await LoginUseCase(mock_uow, hasher, tokens).execute("a@acme.com", "password1")

    mock_uow.users.update.assert_not_called()
    mock_uow.commit.assert_not_called()
