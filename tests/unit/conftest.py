import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService


def _repository(*methods):
    repo = MagicMock()
    for name in methods:
        setattr(repo, name, AsyncMock(return_value=None))
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _repository(
        "get_by_email", "get_by_username", "get_by_id", "get_by_reset_token", "create", "update"
    )
    uow.subreddits = _repository(
        "get_by_id", "get_by_name", "get_by_display_name", "list", "create", "update", "delete"
    )
    uow.posts = _repository(
        "get_by_id",
        "get_visible_by_id",
        "list",
        "create",
        "update",
        "delete",
        "delete_by_subreddit",
    )

    # Repositories hand back the entity they were given
    for repo in (uow.users, uow.subreddits, uow.posts):
        repo.create.side_effect = _assign_id
        repo.update.side_effect = lambda entity: entity
    return uow


def _assign_id(entity):
    if entity.id is None:
        entity.id = 1
    return entity


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return TokenService(secret="unit-test-secret")
