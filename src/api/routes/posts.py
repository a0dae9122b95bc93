from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import optional_identity, require_identity
from src.api.utils.pagination import PageParams, page_params
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import MessageResponse
from src.app.use_cases.posts import (
    CreatePostCommand,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostInfo,
    PostListResponse,
    UpdatePostCommand,
    UpdatePostUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import PostType
from src.domain.identity import AuthenticatedIdentity, Identity

router = APIRouter(prefix="/posts", tags=["Posts"])


class PostResponse(BaseModel):
    message: str
    data: PostInfo


class PostDataResponse(BaseModel):
    data: PostInfo


class CreatePostRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=300)
    content: Optional[str] = None
    post_type: PostType = PostType.text
    link_url: Optional[str] = None
    image_url: Optional[str] = None
    is_locked: bool = False
    is_nsfw: bool = False
    subreddit_id: int


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PostResponse)
async def create_post(
    request: CreatePostRequest,
    identity: AuthenticatedIdentity = Depends(require_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit a post.

    Raises:
        - 400 Bad Request: Invalid body, or link/image post without its URL
        - 404 Not Found: Subreddit does not exist
    """
    command = CreatePostCommand(author_id=identity.id, **request.model_dump())

    result = await CreatePostUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return PostResponse(message="Post created successfully", data=result.value)


@router.get("", status_code=status.HTTP_200_OK, response_model=PostListResponse)
async def list_posts(
    page: PageParams = Depends(page_params),
    subreddit_id: Optional[int] = Query(None),
    identity: Identity = Depends(optional_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List posts by score, optionally within one subreddit; private ones only for their creator"""
    viewer_id = identity.id if identity.is_authenticated else None

    result = await ListPostsUseCase(uow).execute(
        page.limit, page.offset, subreddit_id, viewer_id
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{post_id}", status_code=status.HTTP_200_OK, response_model=PostDataResponse)
async def get_post(
    post_id: int,
    identity: Identity = Depends(optional_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    viewer_id = identity.id if identity.is_authenticated else None

    result = await GetPostUseCase(uow).execute(post_id, viewer_id)

    if result.is_err():
        raise_for_error(result.error)

    return PostDataResponse(data=result.value)


class UpdatePostRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    content: Optional[str] = None
    post_type: Optional[PostType] = None
    link_url: Optional[str] = None
    image_url: Optional[str] = None
    is_locked: Optional[bool] = None
    is_nsfw: Optional[bool] = None


@router.put("/{post_id}", status_code=status.HTTP_200_OK, response_model=PostResponse)
async def update_post(
    post_id: int,
    request: UpdatePostRequest,
    identity: AuthenticatedIdentity = Depends(require_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partially update a post; author only.

    Raises:
        - 403 Forbidden: Caller is not the author
        - 404 Not Found: No such post
    """
    command = UpdatePostCommand(
        post_id=post_id, user_id=identity.id, **request.model_dump(exclude_unset=True)
    )

    result = await UpdatePostUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return PostResponse(message="Post updated successfully", data=result.value)


@router.delete("/{post_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_post(
    post_id: int,
    identity: AuthenticatedIdentity = Depends(require_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeletePostUseCase(uow).execute(post_id, identity.id)

    if result.is_err():
        raise_for_error(result.error)

    return MessageResponse(message="Post deleted successfully")
