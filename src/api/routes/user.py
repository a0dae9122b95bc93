from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.auth import require_identity
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ChangePasswordCommand,
    ChangePasswordUseCase,
    MessageResponse,
    UserInfo,
)
from src.app.use_cases.users import LoadProfileUseCase
from src.depends import get_password_hasher, get_unit_of_work
from src.domain.identity import AuthenticatedIdentity

router = APIRouter(tags=["User"])


class MeResponse(BaseModel):
    """GET /me response payload"""

    user: UserInfo


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def get_me(
    identity: AuthenticatedIdentity = Depends(require_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load the profile of the token holder.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Account no longer exists
    """
    result = await LoadProfileUseCase(uow).execute(identity.id)

    if result.is_err():
        raise_for_error(result.error)

    return MeResponse(user=result.value)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(identity: AuthenticatedIdentity = Depends(require_identity)):
    """
    Log out.

    Tokens are not revoked server-side; the client discards its token and it
    stays valid until expiry.
    """
    return MessageResponse(message="Logged out successfully")


class UpdatePasswordRequest(BaseModel):
    old_password: str = Field(..., description="Current password")
    new_password: str = Field(..., description="New password (min 8 chars)")


@router.post(
    "/update-password", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def update_password(
    request: UpdatePasswordRequest,
    identity: AuthenticatedIdentity = Depends(require_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Change the caller's password after re-checking the current one.

    Raises:
        - 400 Bad Request: New password violates policy
        - 401 Unauthorized: Bad token or wrong current password
    """
    command = ChangePasswordCommand(
        user_id=identity.id,
        old_password=request.old_password,
        new_password=request.new_password,
    )

    result = await ChangePasswordUseCase(uow, hasher).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
