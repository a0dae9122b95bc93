"""
Update Post Use Case

Applies a partial update to a post written by the caller.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .create_post_use_case import check_post_content
from .dtos import PostInfo, UpdatePostCommand

UPDATABLE_FIELDS = (
    "title",
    "content",
    "post_type",
    "link_url",
    "image_url",
    "is_locked",
    "is_nsfw",
)
NON_NULLABLE_FIELDS = {"title", "post_type", "is_locked", "is_nsfw"}


class UpdatePostUseCase:
    """
    Use case for updating a post.

    Business Rules:
    - Only the author may update
    - Subreddit, author and vote counters cannot be changed here
    - Fields the caller did not send are left untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdatePostCommand) -> Result[PostInfo]:
        changes = {
            field: getattr(command, field)
            for field in UPDATABLE_FIELDS
            if field in command.model_fields_set
            and not (field in NON_NULLABLE_FIELDS and getattr(command, field) is None)
        }

        async with self.uow:
            post = await self.uow.posts.get_by_id(command.post_id)
            if post is None:
                return Return.err(Error("POST_NOT_FOUND", "Post not found"))

            if post.author_id != command.user_id:
                return Return.err(Error("FORBIDDEN", "You are not authorized"))

            content_check = check_post_content(
                changes.get("post_type", post.post_type),
                changes.get("link_url", post.link_url),
                changes.get("image_url", post.image_url),
            )
            if content_check.is_err():
                return Return.err(content_check.error)

            for field, value in changes.items():
                setattr(post, field, value)

            post = await self.uow.posts.update(post)
            await self.uow.commit()

            return Return.ok(PostInfo.model_validate(post))
