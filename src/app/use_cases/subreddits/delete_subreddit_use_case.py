from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return


class DeleteSubredditUseCase:
    """Delete a subreddit; only its creator may do so. Its posts go with it."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, subreddit_id: int, user_id: int) -> Result[None]:
        async with self.uow:
            subreddit = await self.uow.subreddits.get_by_id(subreddit_id)
            if subreddit is None:
                return Return.err(Error("SUBREDDIT_NOT_FOUND", "Subreddit not found"))

            if subreddit.created_by != user_id:
                return Return.err(Error("FORBIDDEN", "You are not authorized"))

            await self.uow.posts.delete_by_subreddit(subreddit.id)
            await self.uow.subreddits.delete(subreddit)
            await self.uow.commit()

            return Return.ok(None)
