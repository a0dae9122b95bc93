from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Subreddit


class ISubredditRepository(ABC):
    """Subreddit repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, subreddit_id: int) -> Optional[Subreddit]:
        """Get subreddit by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Subreddit]:
        """Get subreddit by its unique name"""
        pass

    @abstractmethod
    async def get_by_display_name(self, display_name: str) -> Optional[Subreddit]:
        """Get subreddit by display name"""
        pass

    @abstractmethod
    async def list(
        self, limit: int, offset: int, viewer_id: Optional[int] = None
    ) -> List[Subreddit]:
        """List subreddits by member count; private ones only for their creator"""
        pass

    @abstractmethod
    async def create(self, subreddit: Subreddit) -> Subreddit:
        """Create a new subreddit"""
        pass

    @abstractmethod
    async def update(self, subreddit: Subreddit) -> Subreddit:
        """Update existing subreddit"""
        pass

    @abstractmethod
    async def delete(self, subreddit: Subreddit) -> None:
        """Delete a subreddit"""
        pass
