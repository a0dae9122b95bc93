from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.pagination import Pagination
from src.libs.result import Result, Return

from .dtos import SubredditInfo, SubredditListResponse


class ListSubredditsUseCase:
    """List subreddits, most members first; private ones only for their creator"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, limit: int, offset: int, viewer_id: Optional[int] = None
    ) -> Result[SubredditListResponse]:
        async with self.uow:
            subreddits = await self.uow.subreddits.list(limit, offset, viewer_id)

            return Return.ok(
                SubredditListResponse(
                    subreddits=[SubredditInfo.model_validate(s) for s in subreddits],
                    pagination=Pagination(
                        limit=limit, offset=offset, count=len(subreddits)
                    ),
                )
            )
