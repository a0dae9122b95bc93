"""
Create Post Use Case

Submits a post to an existing subreddit.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Post
from src.libs.result import Error, Result, Return

from .dtos import CreatePostCommand, PostInfo


class CreatePostUseCase:
    """
    Use case for creating a post.

    Business Rules:
    - Target subreddit must exist; a private one only accepts posts from its creator
    - Link posts need link_url, image posts need image_url
    - Votes, score and comment count start at zero
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreatePostCommand) -> Result[PostInfo]:
        content_check = check_post_content(
            command.post_type, command.link_url, command.image_url
        )
        if content_check.is_err():
            return Return.err(content_check.error)

        async with self.uow:
            subreddit = await self.uow.subreddits.get_by_id(command.subreddit_id)
            if subreddit is None or (
                subreddit.is_private and subreddit.created_by != command.author_id
            ):
                return Return.err(Error("SUBREDDIT_NOT_FOUND", "Subreddit not found"))

            post = Post(
                title=command.title,
                content=command.content,
                post_type=command.post_type,
                link_url=command.link_url,
                image_url=command.image_url,
                is_locked=command.is_locked,
                is_nsfw=command.is_nsfw,
                author_id=command.author_id,
                subreddit_id=subreddit.id,
                upvotes=0,
                downvotes=0,
                score=0,
                comment_count=0,
            )
            post = await self.uow.posts.create(post)

            await self.uow.commit()

            return Return.ok(PostInfo.model_validate(post))


def check_post_content(post_type, link_url, image_url) -> Result[None]:
    if post_type == "link" and not link_url:
        return Return.err(Error("INVALID_POST", "Link posts require link_url"))
    if post_type == "image" and not image_url:
        return Return.err(Error("INVALID_POST", "Image posts require image_url"))
    return Return.ok(None)
