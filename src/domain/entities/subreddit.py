"""
Subreddit Entity

A named community that posts belong to.
"""

from datetime import datetime
from typing import Any, List, Optional

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Subreddit(SQLModel, table=True):
    """
    Subreddit entity - a community owned by the user who created it.

    Business Rules:
    - name is lowercase letters, digits and underscores, unique
    - display_name is unique
    - Only the creator may update or delete it
    - Private subreddits are only visible to their creator
    """

    __tablename__ = "subreddits"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=50)
    display_name: str = Field(unique=True, max_length=100)
    description: Optional[str] = None

    rules: List[Any] = Field(default_factory=list, sa_column=Column(JSON))
    flairs: List[Any] = Field(default_factory=list, sa_column=Column(JSON))

    banner_image_url: Optional[str] = Field(default=None, max_length=500)
    icon_image_url: Optional[str] = Field(default=None, max_length=500)
    is_nsfw: bool = Field(default=False)
    is_private: bool = Field(default=False)

    created_by: int = Field(foreign_key="users.id", index=True)
    members_count: int = Field(default=1)
    active_users: int = Field(default=0)

    # Timestamps
    rules_updated_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_subreddit_members_count", "members_count"),)
