"""
Post Entity

A submission to a subreddit.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import PostType


class Post(SQLModel, table=True):
    """
    Post entity - a submission to a subreddit.

    Business Rules:
    - Counters start at zero; score = upvotes - downvotes
    - Only the author may update or delete it
    """

    __tablename__ = "posts"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=300)
    content: Optional[str] = None
    post_type: PostType = Field(default=PostType.text)
    link_url: Optional[str] = Field(default=None, max_length=2000)
    image_url: Optional[str] = Field(default=None, max_length=2000)

    author_id: int = Field(foreign_key="users.id", index=True)
    subreddit_id: int = Field(foreign_key="subreddits.id", ondelete="CASCADE", index=True)

    upvotes: int = Field(default=0)
    downvotes: int = Field(default=0)
    score: int = Field(default=0)
    comment_count: int = Field(default=0)

    is_locked: bool = Field(default=False)
    is_nsfw: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_post_score", "score"),)
