"""
Forum Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import PostType

# Export all entities
from .user import User
from .subreddit import Subreddit
from .post import Post

__all__ = [
    # Enums
    "PostType",
    # Entities
    "User",
    "Subreddit",
    "Post",
]
