from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return


class DeletePostUseCase:
    """Delete a post; only its author may do so"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, post_id: int, user_id: int) -> Result[None]:
        async with self.uow:
            post = await self.uow.posts.get_by_id(post_id)
            if post is None:
                return Return.err(Error("POST_NOT_FOUND", "Post not found"))

            if post.author_id != user_id:
                return Return.err(Error("FORBIDDEN", "You are not authorized"))

            await self.uow.posts.delete(post)
            await self.uow.commit()

            return Return.ok(None)
