"""
User Entity

Represents a registered account on the board.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - a registered account.

    Business Rules:
    - Email and username are unique across all users
    - Password stored as bcrypt hash, never serialized outward
    - At most one live password reset token per user; stored as SHA-256 digest
      with an absolute expiry, cleared once consumed
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Profile
    avatar_url: Optional[str] = Field(default=None, max_length=500)
    bio: Optional[str] = None

    # Password reset (forgot-password / reset-password)
    reset_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
