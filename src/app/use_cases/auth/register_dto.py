"""
Register Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (validated business intent)
- AuthResponse: Output of register and login (user + session token)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import User


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    email: str
    username: str
    password: str


class UserInfo(BaseModel):
    """Public user fields; password hash and reset token are never exposed"""

    id: int
    username: str
    email: str
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            avatar_url=user.avatar_url,
            bio=user.bio,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(BaseModel):
    """
    Register/login response - user plus a fresh session token
    """

    user: UserInfo
    token: str
