from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.post_repository import IPostRepository
from src.domain.base import utcnow
from src.domain.entities import Post, Subreddit


class PostRepository(IPostRepository):
    """Post repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """Get post by ID"""
        stmt = select(Post).where(Post.id == post_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_visible_by_id(
        self, post_id: int, viewer_id: Optional[int] = None
    ) -> Optional[Post]:
        """Get post by ID unless it sits in a private subreddit the viewer does not own"""
        stmt = _visible_to(select(Post).where(Post.id == post_id), viewer_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(
        self,
        limit: int,
        offset: int,
        subreddit_id: Optional[int] = None,
        viewer_id: Optional[int] = None,
    ) -> List[Post]:
        """List posts by score, optionally within one subreddit"""
        stmt = _visible_to(select(Post), viewer_id)
        if subreddit_id is not None:
            stmt = stmt.where(Post.subreddit_id == subreddit_id)
        stmt = (
            stmt.order_by(col(Post.score).desc(), col(Post.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, post: Post) -> Post:
        """Create a new post"""
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def update(self, post: Post) -> Post:
        """Update existing post"""
        post.updated_at = utcnow()
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def delete(self, post: Post) -> None:
        """Delete a post"""
        await self.session.delete(post)
        await self.session.flush()

    async def delete_by_subreddit(self, subreddit_id: int) -> int:
        """Delete every post in a subreddit, returning how many were removed"""
        stmt = delete(Post).where(Post.subreddit_id == subreddit_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount


def _visible_to(stmt, viewer_id: Optional[int]):
    """Restrict a Post query to subreddits that are public or created by the viewer"""
    stmt = stmt.join(Subreddit, Subreddit.id == Post.subreddit_id)
    if viewer_id is None:
        return stmt.where(Subreddit.is_private == False)  # noqa: E712
    return stmt.where(
        or_(Subreddit.is_private == False, Subreddit.created_by == viewer_id)  # noqa: E712
    )
