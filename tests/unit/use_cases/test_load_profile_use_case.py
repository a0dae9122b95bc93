import pytest

from src.app.use_cases.users import LoadProfileUseCase
from src.domain.entities import User


@pytest.mark.asyncio
async def test_load_profile(mock_uow):
    mock_uow.users.get_by_id.return_value = User(
        id=3, username="alice", email="a@acme.com", password_hash="x", bio="hi"
    )

    result = await LoadProfileUseCase(mock_uow).execute(3)

    assert result.value.username == "alice"
    assert result.value.bio == "hi"
    mock_uow.users.get_by_id.assert_called_once_with(3)


@pytest.mark.asyncio
async def test_profile_missing(mock_uow):
    result = await LoadProfileUseCase(mock_uow).execute(99)

    assert result.error.code == "USER_NOT_FOUND"
