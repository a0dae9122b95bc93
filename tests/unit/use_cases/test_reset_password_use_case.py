from datetime import timedelta

import pytest

from src.app.services.reset_token_manager import hash_reset_token
from src.app.use_cases.auth import ResetPasswordCommand, ResetPasswordUseCase
from src.domain.base import utcnow
from src.domain.entities import User


@pytest.fixture
def user(hasher):
    return User(
        id=3,
        username="alice",
        email="a@acme.com",
        password_hash=hasher.hash("password1"),
        reset_token=hash_reset_token("reset-me"),
        reset_token_expires_at=utcnow() + timedelta(minutes=30),
    )


def _command(token="reset-me", new_password="password2"):
    return ResetPasswordCommand(token=token, new_password=new_password)


@pytest.mark.asyncio
async def test_reset_password(mock_uow, hasher, user):
    mock_uow.users.get_by_reset_token.return_value = user

    result = await ResetPasswordUseCase(mock_uow, hasher).execute(_command())

    assert result.value.message == "Password reset successfully"
    assert hasher.verify("password2", user.password_hash)
    assert user.reset_token is None
    assert user.reset_token_expires_at is None
    mock_uow.users.get_by_reset_token.assert_called_once_with(hash_reset_token("reset-me"))
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_unknown_token(mock_uow, hasher):
    result = await ResetPasswordUseCase(mock_uow, hasher).execute(_command(token="nope"))

    assert result.error.code == "RESET_TOKEN_INVALID"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_expired_token_is_kept(mock_uow, hasher, user):
    user.reset_token_expires_at = utcnow() - timedelta(seconds=1)
    mock_uow.users.get_by_reset_token.return_value = user

    result = await ResetPasswordUseCase(mock_uow, hasher).execute(_command())

    assert result.error.code == "RESET_TOKEN_EXPIRED"
    assert user.reset_token == hash_reset_token("reset-me")
    assert hasher.verify("password1", user.password_hash)


@pytest.mark.asyncio
async def test_weak_password_checked_before_lookup(mock_uow, hasher):
    result = await ResetPasswordUseCase(mock_uow, hasher).execute(_command(new_password="short"))

    assert result.error.code == "INVALID_PASSWORD"
    mock_uow.users.get_by_reset_token.assert_not_called()


@pytest.mark.asyncio
async def test_token_survives_failed_persist(mock_uow, hasher, user):
    mock_uow.users.get_by_reset_token.return_value = user
    mock_uow.users.update.side_effect = RuntimeError("database unavailable")

    with pytest.raises(RuntimeError):
        await ResetPasswordUseCase(mock_uow, hasher).execute(_command())

    assert user.reset_token == hash_reset_token("reset-me")
    mock_uow.commit.assert_not_called()
