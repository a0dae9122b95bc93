from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import PostInfo


class GetPostUseCase:
    """Posts in a private subreddit are reported as not found to everyone but its creator"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, post_id: int, viewer_id: Optional[int] = None) -> Result[PostInfo]:
        async with self.uow:
            post = await self.uow.posts.get_visible_by_id(post_id, viewer_id)
            if post is None:
                return Return.err(Error("POST_NOT_FOUND", "Post not found"))

            return Return.ok(PostInfo.model_validate(post))
