"""
Reset Password Use Case

Sets a new password using a reset token from email.
"""

import logging

from src.app.services.password_hasher import HashingError, PasswordHasher
from src.app.services.reset_token_manager import ResetTokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import MessageResponse, ResetPasswordCommand
from .password_policy import validate_password

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - Token must resolve to a user and must not be expired
    - New password follows the shared password policy
    - Password is saved before the token is consumed; both are committed
      together, so a failed save leaves the token usable for a retry
    - Token is single-use
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: ResetPasswordCommand) -> Result[MessageResponse]:
        """
        Execute reset password use case.

        Returns:
            Result with confirmation message, or Error(INVALID_PASSWORD /
            RESET_TOKEN_INVALID / RESET_TOKEN_EXPIRED / HASHING_FAILED)
        """
        password_validation = validate_password(command.new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            reset_tokens = ResetTokenManager(self.uow.users)

            user = await reset_tokens.resolve(command.token)
            if user is None:
                return Return.err(
                    Error("RESET_TOKEN_INVALID", "Invalid or expired reset token")
                )

            if reset_tokens.is_expired(user):
                return Return.err(
                    Error("RESET_TOKEN_EXPIRED", "Reset token has expired")
                )

            try:
                user.password_hash = self.hasher.hash(command.new_password)
            except HashingError as exc:
                logger.error(f"Password hashing failed for user {user.id}: {exc}")
                return Return.err(Error("HASHING_FAILED", "Failed to hash password"))

            await self.uow.users.update(user)
            await reset_tokens.consume(user)

            await self.uow.commit()

            logger.info(f"Password reset completed for user {user.id}")

            return Return.ok(MessageResponse(message="Password reset successfully"))
