from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .create_subreddit_use_case import normalize_subreddit_name
from .dtos import SubredditInfo


class GetSubredditUseCase:
    """
    Look up a subreddit by name.

    Private subreddits are reported as not found to everyone but their creator.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, name: str, viewer_id: Optional[int] = None) -> Result[SubredditInfo]:
        async with self.uow:
            subreddit = await self.uow.subreddits.get_by_name(normalize_subreddit_name(name))

            if subreddit is None or (
                subreddit.is_private and subreddit.created_by != viewer_id
            ):
                return Return.err(Error("SUBREDDIT_NOT_FOUND", "Subreddit not found"))

            return Return.ok(SubredditInfo.model_validate(subreddit))
