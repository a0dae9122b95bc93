"""
Reset-Token Manager

Single-use password reset tokens stored on the owning user row.
"""

import hashlib
import secrets
from datetime import datetime, timedelta
from typing import Optional, Tuple

from src.app.repositories.user_repository import IUserRepository
from src.domain.base import utcnow
from src.domain.entities import User


def hash_reset_token(token: str) -> str:
    """SHA-256 digest stored in place of the plain token"""
    return hashlib.sha256(token.encode()).hexdigest()


class ResetTokenManager:
    """
    Password reset token lifecycle.

    Business Rules:
    - Tokens are 32 random bytes, URL-safe encoded
    - Only the SHA-256 digest is persisted
    - Issuing a token overwrites any pending one (at most one per user)
    - resolve() does not filter by expiry; callers check is_expired()
    - consume() clears token and expiry; call once after the password is saved
    """

    TOKEN_BYTES = 32

    def __init__(self, users: IUserRepository, validity: timedelta = timedelta(hours=1)):
        self.users = users
        self.validity = validity

    @classmethod
    def generate(cls) -> str:
        return secrets.token_urlsafe(cls.TOKEN_BYTES)

    async def issue_for(self, user: User) -> Tuple[str, datetime]:
        """Create a token for the user, replacing any previous one"""
        token = self.generate()
        expires_at = utcnow() + self.validity

        user.reset_token = hash_reset_token(token)
        user.reset_token_expires_at = expires_at
        await self.users.update(user)

        return token, expires_at

    async def resolve(self, token: str) -> Optional[User]:
        """Find the owner of a token, expired or not"""
        return await self.users.get_by_reset_token(hash_reset_token(token))

    @staticmethod
    def is_expired(user: User, now: Optional[datetime] = None) -> bool:
        if user.reset_token_expires_at is None:
            return True
        return (now or utcnow()) > user.reset_token_expires_at

    async def consume(self, user: User) -> None:
        """Clear the token so it cannot be used again"""
        user.reset_token = None
        user.reset_token_expires_at = None
        await self.users.update(user)
