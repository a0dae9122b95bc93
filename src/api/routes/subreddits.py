from typing import Any, List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import optional_identity, require_identity
from src.api.utils.pagination import PageParams, page_params
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import MessageResponse
from src.app.use_cases.subreddits import (
    CreateSubredditCommand,
    CreateSubredditUseCase,
    DeleteSubredditUseCase,
    GetSubredditUseCase,
    ListSubredditsUseCase,
    SubredditInfo,
    SubredditListResponse,
    UpdateSubredditCommand,
    UpdateSubredditUseCase,
)
from src.depends import get_unit_of_work
from src.domain.identity import AuthenticatedIdentity, Identity

router = APIRouter(prefix="/subreddits", tags=["Subreddits"])


class SubredditResponse(BaseModel):
    message: str
    data: SubredditInfo


class CreateSubredditRequest(BaseModel):
    name: str = Field(..., min_length=3, max_length=50)
    display_name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    rules: Optional[List[Any]] = None
    is_nsfw: bool = False
    is_private: bool = False


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SubredditResponse)
async def create_subreddit(
    request: CreateSubredditRequest,
    identity: AuthenticatedIdentity = Depends(require_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a community owned by the caller.

    Raises:
        - 400 Bad Request: Name is not 3-50 lowercase letters, digits or underscores
        - 409 Conflict: Name or display name already taken
    """
    command = CreateSubredditCommand(created_by=identity.id, **request.model_dump())

    result = await CreateSubredditUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return SubredditResponse(message="Subreddit created successfully", data=result.value)


@router.get("", status_code=status.HTTP_200_OK, response_model=SubredditListResponse)
async def list_subreddits(
    page: PageParams = Depends(page_params),
    identity: Identity = Depends(optional_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List communities by member count; private ones only for their creator"""
    viewer_id = identity.id if identity.is_authenticated else None

    result = await ListSubredditsUseCase(uow).execute(page.limit, page.offset, viewer_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{name}", status_code=status.HTTP_200_OK, response_model=SubredditResponse)
async def get_subreddit(
    name: str,
    identity: Identity = Depends(optional_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    viewer_id = identity.id if identity.is_authenticated else None

    result = await GetSubredditUseCase(uow).execute(name, viewer_id)

    if result.is_err():
        raise_for_error(result.error)

    return SubredditResponse(message="Subreddit retrieved successfully", data=result.value)


class UpdateSubredditRequest(BaseModel):
    display_name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    rules: Optional[List[Any]] = None
    banner_image_url: Optional[str] = None
    icon_image_url: Optional[str] = None
    is_nsfw: Optional[bool] = None
    is_private: Optional[bool] = None
    flairs: Optional[List[Any]] = None


@router.put(
    "/{subreddit_id}", status_code=status.HTTP_200_OK, response_model=SubredditResponse
)
async def update_subreddit(
    subreddit_id: int,
    request: UpdateSubredditRequest,
    identity: AuthenticatedIdentity = Depends(require_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Partially update a community. Only fields present in the body change.

    Raises:
        - 403 Forbidden: Caller is not the creator
        - 404 Not Found: No such subreddit
    """
    command = UpdateSubredditCommand(
        subreddit_id=subreddit_id,
        user_id=identity.id,
        **request.model_dump(exclude_unset=True),
    )

    result = await UpdateSubredditUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return SubredditResponse(message="Subreddit updated successfully", data=result.value)


@router.delete(
    "/{subreddit_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def delete_subreddit(
    subreddit_id: int,
    identity: AuthenticatedIdentity = Depends(require_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a community and its posts; creator only"""
    result = await DeleteSubredditUseCase(uow).execute(subreddit_id, identity.id)

    if result.is_err():
        raise_for_error(result.error)

    return MessageResponse(message="Subreddit deleted successfully")
