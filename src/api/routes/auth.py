from datetime import timedelta

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.app.services.email_sender import IEmailSender
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    ForgotPasswordUseCase,
    LoginUseCase,
    MessageResponse,
    RegisterCommand,
    RegisterUseCase,
    ResetPasswordCommand,
    ResetPasswordUseCase,
)
from src.depends import (
    get_email_sender,
    get_frontend_url,
    get_password_hasher,
    get_reset_token_ttl,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    Password length policy is enforced by the use case so every flow shares it.
    """

    email: EmailStr = Field(..., description="User email address")
    username: str = Field(..., min_length=1, max_length=50, description="Public username")
    password: str = Field(..., description="User password (min 8 chars)")


@router.post("/register", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Register a new account and return it with a session token.

    Raises:
        - 400 Bad Request: Invalid input or password policy violation
        - 409 Conflict: Email or username already taken
        - 500 Internal Server Error: Hashing or database failure
    """
    command = RegisterCommand(
        email=request.email, username=request.username, password=request.password
    )

    result = await RegisterUseCase(uow, hasher, tokens).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same 401 response.
    """
    result = await LoginUseCase(uow, hasher, tokens).execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Account email address")


@router.post(
    "/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
    frontend_url: str = Depends(get_frontend_url),
    reset_token_ttl: timedelta = Depends(get_reset_token_ttl),
):
    """
    Request a password reset email.

    Always answers with the same message so callers cannot tell which
    emails are registered.

    Raises:
        - 400 Bad Request: Invalid email
        - 500 Internal Server Error: Email could not be delivered
    """
    use_case = ForgotPasswordUseCase(
        uow, email_sender, frontend_url, reset_token_ttl=reset_token_ttl
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Reset token from the email link")
    new_password: str = Field(..., description="New password (min 8 chars)")


@router.post(
    "/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Set a new password with a single-use reset token.

    Raises:
        - 400 Bad Request: Unknown, expired or already used token, or weak password
        - 500 Internal Server Error: Server error
    """
    command = ResetPasswordCommand(token=request.token, new_password=request.new_password)

    result = await ResetPasswordUseCase(uow, hasher).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
