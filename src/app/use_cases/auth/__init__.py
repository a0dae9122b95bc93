"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .register_dto import RegisterCommand, AuthResponse, UserInfo
from .login_use_case import LoginUseCase
from .change_password_use_case import ChangePasswordUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import ChangePasswordCommand, ResetPasswordCommand, MessageResponse

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "ChangePasswordUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "ChangePasswordCommand",
    "ResetPasswordCommand",
    # DTOs - Responses
    "AuthResponse",
    "MessageResponse",
    # DTOs - Nested Models
    "UserInfo",
]
