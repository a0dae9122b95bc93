"""
Change Password Use Case

Lets an authenticated user replace their password after re-entering the old one.
"""

import logging

from src.app.services.password_hasher import HashingError, PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import ChangePasswordCommand, MessageResponse
from .password_policy import validate_password

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing the password of the calling user.

    Business Rules:
    - Identity comes from a verified session token
    - Old password must verify before the new one is accepted
    - New password follows the shared password policy
    - Existing session tokens stay valid (no revocation)
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: ChangePasswordCommand) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(command.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not self.hasher.verify(command.old_password, user.password_hash):
                return Return.err(
                    Error("INVALID_OLD_PASSWORD", "Old password does not match")
                )

            password_validation = validate_password(command.new_password)
            if password_validation.is_err():
                return Return.err(password_validation.error)

            try:
                user.password_hash = self.hasher.hash(command.new_password)
            except HashingError as exc:
                logger.error(f"Password hashing failed for user {user.id}: {exc}")
                return Return.err(Error("HASHING_FAILED", "Failed to hash password"))

            await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(f"Password changed for user {user.id}")

            return Return.ok(MessageResponse(message="Password updated successfully"))
