from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.pagination import Pagination
from src.libs.result import Result, Return

from .dtos import PostInfo, PostListResponse


class ListPostsUseCase:
    """
    List posts by score, highest first, optionally within one subreddit.

    Posts in private subreddits are only listed for the subreddit creator.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        limit: int,
        offset: int,
        subreddit_id: Optional[int] = None,
        viewer_id: Optional[int] = None,
    ) -> Result[PostListResponse]:
        async with self.uow:
            posts = await self.uow.posts.list(limit, offset, subreddit_id, viewer_id)

            return Return.ok(
                PostListResponse(
                    posts=[PostInfo.model_validate(p) for p in posts],
                    pagination=Pagination(limit=limit, offset=offset, count=len(posts)),
                )
            )
