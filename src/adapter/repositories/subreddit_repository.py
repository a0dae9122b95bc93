from typing import List, Optional

from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.subreddit_repository import ISubredditRepository
from src.domain.base import utcnow
from src.domain.entities import Subreddit


class SubredditRepository(ISubredditRepository):
    """Subreddit repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, subreddit_id: int) -> Optional[Subreddit]:
        """Get subreddit by ID"""
        stmt = select(Subreddit).where(Subreddit.id == subreddit_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[Subreddit]:
        """Get subreddit by its unique name"""
        stmt = select(Subreddit).where(Subreddit.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_display_name(self, display_name: str) -> Optional[Subreddit]:
        """Get subreddit by display name"""
        stmt = select(Subreddit).where(Subreddit.display_name == display_name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list(
        self, limit: int, offset: int, viewer_id: Optional[int] = None
    ) -> List[Subreddit]:
        """List subreddits by member count; private ones only for their creator"""
        stmt = select(Subreddit)
        if viewer_id is None:
            stmt = stmt.where(Subreddit.is_private == False)  # noqa: E712
        else:
            stmt = stmt.where(
                or_(Subreddit.is_private == False, Subreddit.created_by == viewer_id)  # noqa: E712
            )
        stmt = (
            stmt.order_by(col(Subreddit.members_count).desc(), col(Subreddit.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, subreddit: Subreddit) -> Subreddit:
        """Create a new subreddit"""
        self.session.add(subreddit)
        await self.session.flush()
        await self.session.refresh(subreddit)
        return subreddit

    async def update(self, subreddit: Subreddit) -> Subreddit:
        """Update existing subreddit"""
        subreddit.updated_at = utcnow()
        self.session.add(subreddit)
        await self.session.flush()
        await self.session.refresh(subreddit)
        return subreddit

    async def delete(self, subreddit: Subreddit) -> None:
        """Delete a subreddit"""
        await self.session.delete(subreddit)
        await self.session.flush()
