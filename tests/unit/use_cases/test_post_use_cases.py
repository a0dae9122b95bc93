import pytest

from src.app.use_cases.posts import (
    CreatePostCommand,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostCommand,
    UpdatePostUseCase,
)
from src.domain.entities import Post, PostType, Subreddit


def _post(**overrides):
    data = {"id": 5, "title": "Hello", "author_id": 1, "subreddit_id": 10}
    data.update(overrides)
    return Post(**data)


@pytest.mark.asyncio
async def test_create_post(mock_uow):
    mock_uow.subreddits.get_by_id.return_value = Subreddit(
        id=10, name="python", display_name="Python", created_by=1
    )
    command = CreatePostCommand(title="Hello", content="World", subreddit_id=10, author_id=2)

    result = await CreatePostUseCase(mock_uow).execute(command)

    post = result.value
    assert post.title == "Hello"
    assert post.author_id == 2
    assert post.post_type == PostType.text
    assert (post.upvotes, post.downvotes, post.score, post.comment_count) == (0, 0, 0, 0)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_post_in_missing_subreddit(mock_uow):
    command = CreatePostCommand(title="Hello", subreddit_id=99, author_id=2)

    result = await CreatePostUseCase(mock_uow).execute(command)

    assert result.error.code == "SUBREDDIT_NOT_FOUND"
    mock_uow.posts.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_post_in_private_subreddit(mock_uow):
    mock_uow.subreddits.get_by_id.return_value = Subreddit(
        id=10, name="secret", display_name="Secret", created_by=1, is_private=True
    )
    use_case = CreatePostUseCase(mock_uow)

    outsider = await use_case.execute(CreatePostCommand(title="Hi", subreddit_id=10, author_id=2))
    creator = await use_case.execute(CreatePostCommand(title="Hi", subreddit_id=10, author_id=1))

    assert outsider.error.code == "SUBREDDIT_NOT_FOUND"
    assert creator.is_ok()
    mock_uow.posts.create.assert_called_once()


@pytest.mark.asyncio
async def test_link_post_needs_url(mock_uow):
    command = CreatePostCommand(title="Look", post_type="link", subreddit_id=10, author_id=2)

    result = await CreatePostUseCase(mock_uow).execute(command)

    assert result.error.code == "INVALID_POST"


@pytest.mark.asyncio
async def test_get_post(mock_uow):
    mock_uow.posts.get_visible_by_id.return_value = _post()

    assert (await GetPostUseCase(mock_uow).execute(5, viewer_id=3)).value.id == 5
    mock_uow.posts.get_visible_by_id.assert_called_once_with(5, 3)

    mock_uow.posts.get_visible_by_id.return_value = None
    assert (await GetPostUseCase(mock_uow).execute(6)).error.code == "POST_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_posts_filters_by_subreddit(mock_uow):
    mock_uow.posts.list.return_value = [_post(score=3), _post(id=6, score=1)]

    result = await ListPostsUseCase(mock_uow).execute(10, 0, subreddit_id=10)

    mock_uow.posts.list.assert_called_once_with(10, 0, 10, None)
    assert [p.score for p in result.value.posts] == [3, 1]


@pytest.mark.asyncio
async def test_update_post_by_author(mock_uow):
    mock_uow.posts.get_by_id.return_value = _post(content="old")
    command = UpdatePostCommand(post_id=5, user_id=1, title="Edited")

    result = await UpdatePostUseCase(mock_uow).execute(command)

    assert result.value.title == "Edited"
    assert result.value.content == "old"


@pytest.mark.asyncio
async def test_update_post_by_someone_else(mock_uow):
    mock_uow.posts.get_by_id.return_value = _post()
    command = UpdatePostCommand(post_id=5, user_id=2, title="Mine")

    result = await UpdatePostUseCase(mock_uow).execute(command)

    assert result.error.code == "FORBIDDEN"
    mock_uow.posts.update.assert_not_called()


@pytest.mark.asyncio
async def test_switch_to_image_post_requires_url(mock_uow):
    mock_uow.posts.get_by_id.return_value = _post()
    command = UpdatePostCommand(post_id=5, user_id=1, post_type="image")

    result = await UpdatePostUseCase(mock_uow).execute(command)

    assert result.error.code == "INVALID_POST"


@pytest.mark.asyncio
async def test_delete_post(mock_uow):
    post = _post()
    mock_uow.posts.get_by_id.return_value = post

    assert (await DeletePostUseCase(mock_uow).execute(5, user_id=2)).error.code == "FORBIDDEN"
    assert (await DeletePostUseCase(mock_uow).execute(5, user_id=1)).is_ok()
    mock_uow.posts.delete.assert_called_once_with(post)
