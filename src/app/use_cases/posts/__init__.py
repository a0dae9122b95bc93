"""
Post Use Cases

All post management business logic.
"""

from .create_post_use_case import CreatePostUseCase
from .get_post_use_case import GetPostUseCase
from .list_posts_use_case import ListPostsUseCase
from .update_post_use_case import UpdatePostUseCase
from .delete_post_use_case import DeletePostUseCase
from .dtos import CreatePostCommand, UpdatePostCommand, PostInfo, PostListResponse

__all__ = [
    # Use Cases
    "CreatePostUseCase",
    "GetPostUseCase",
    "ListPostsUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    # DTOs
    "CreatePostCommand",
    "UpdatePostCommand",
    "PostInfo",
    "PostListResponse",
]
