"""
Subreddit Use Cases

All community management business logic.
"""

from .create_subreddit_use_case import CreateSubredditUseCase
from .get_subreddit_use_case import GetSubredditUseCase
from .list_subreddits_use_case import ListSubredditsUseCase
from .update_subreddit_use_case import UpdateSubredditUseCase
from .delete_subreddit_use_case import DeleteSubredditUseCase
from .dtos import (
    CreateSubredditCommand,
    UpdateSubredditCommand,
    SubredditInfo,
    SubredditListResponse,
)

__all__ = [
    # Use Cases
    "CreateSubredditUseCase",
    "GetSubredditUseCase",
    "ListSubredditsUseCase",
    "UpdateSubredditUseCase",
    "DeleteSubredditUseCase",
    # DTOs
    "CreateSubredditCommand",
    "UpdateSubredditCommand",
    "SubredditInfo",
    "SubredditListResponse",
]
