from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Post


class IPostRepository(ABC):
    """Post repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, post_id: int) -> Optional[Post]:
        """Get post by ID"""
        pass

    @abstractmethod
    async def get_visible_by_id(
        self, post_id: int, viewer_id: Optional[int] = None
    ) -> Optional[Post]:
        """Get post by ID, hiding posts in private subreddits the viewer does not own"""
        pass

    @abstractmethod
    async def list(
        self,
        limit: int,
        offset: int,
        subreddit_id: Optional[int] = None,
        viewer_id: Optional[int] = None,
    ) -> List[Post]:
        """List visible posts by score, optionally within one subreddit"""
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Create a new post"""
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Update existing post"""
        pass

    @abstractmethod
    async def delete(self, post: Post) -> None:
        """Delete a post"""
        pass

    @abstractmethod
    async def delete_by_subreddit(self, subreddit_id: int) -> int:
        """Delete every post in a subreddit, returning how many were removed"""
        pass
