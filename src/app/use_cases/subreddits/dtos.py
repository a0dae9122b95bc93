"""
Subreddit Use Case DTOs (Data Transfer Objects)

Commands and responses for community management.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from src.app.use_cases.pagination import Pagination


# ============================================================================
# Command DTOs
# ============================================================================


class CreateSubredditCommand(BaseModel):
    """Create a community owned by the caller"""

    name: str
    display_name: str
    description: Optional[str] = None
    rules: Optional[List[Any]] = None
    is_nsfw: bool = False
    is_private: bool = False
    created_by: int


class UpdateSubredditCommand(BaseModel):
    """
    Partial update of a community.

    Only fields explicitly set by the caller are applied (model_fields_set).
    """

    subreddit_id: int
    user_id: int
    display_name: Optional[str] = None
    description: Optional[str] = None
    rules: Optional[List[Any]] = None
    banner_image_url: Optional[str] = None
    icon_image_url: Optional[str] = None
    is_nsfw: Optional[bool] = None
    is_private: Optional[bool] = None
    flairs: Optional[List[Any]] = None


# ============================================================================
# Response DTOs
# ============================================================================


class SubredditInfo(BaseModel):
    """Subreddit as returned to clients"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    display_name: str
    description: Optional[str] = None
    rules: List[Any]
    banner_image_url: Optional[str] = None
    icon_image_url: Optional[str] = None
    is_nsfw: bool
    is_private: bool
    created_by: int
    members_count: int
    active_users: int
    flairs: List[Any]
    rules_updated_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class SubredditListResponse(BaseModel):
    """A page of subreddits"""

    subreddits: List[SubredditInfo]
    pagination: Pagination
