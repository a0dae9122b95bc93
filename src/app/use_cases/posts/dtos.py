"""
Post Use Case DTOs (Data Transfer Objects)

Commands and responses for post management.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.app.use_cases.pagination import Pagination
from src.domain.entities import PostType


# ============================================================================
# Command DTOs
# ============================================================================


class CreatePostCommand(BaseModel):
    """Submit a post to a subreddit"""

    title: str
    content: Optional[str] = None
    post_type: PostType = PostType.text
    link_url: Optional[str] = None
    image_url: Optional[str] = None
    is_locked: bool = False
    is_nsfw: bool = False
    subreddit_id: int
    author_id: int


class UpdatePostCommand(BaseModel):
    """
    Partial update of a post.

    Only fields explicitly set by the caller are applied (model_fields_set).
    """

    post_id: int
    user_id: int
    title: Optional[str] = None
    content: Optional[str] = None
    post_type: Optional[PostType] = None
    link_url: Optional[str] = None
    image_url: Optional[str] = None
    is_locked: Optional[bool] = None
    is_nsfw: Optional[bool] = None


# ============================================================================
# Response DTOs
# ============================================================================


class PostInfo(BaseModel):
    """Post as returned to clients"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: Optional[str] = None
    post_type: PostType
    link_url: Optional[str] = None
    image_url: Optional[str] = None
    author_id: int
    subreddit_id: int
    upvotes: int
    downvotes: int
    score: int
    comment_count: int
    is_locked: bool
    is_nsfw: bool
    created_at: datetime
    updated_at: datetime


class PostListResponse(BaseModel):
    """A page of posts"""

    posts: List[PostInfo]
    pagination: Pagination
