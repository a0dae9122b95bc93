"""
Forgot Password Use Case

Generates a password reset token and emails the reset link.
"""

import logging
from datetime import timedelta
from urllib.parse import urlencode

from src.app.services.email_sender import EmailDeliveryError, IEmailSender
from src.app.services.reset_token_manager import ResetTokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import MessageResponse

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "If that email exists, a reset link has been sent"


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - No email enumeration: same response for known and unknown emails
    - Token and email only for existing accounts
    - New token overwrites any pending one (last request wins, no locking)
    - Token expires after reset_token_ttl (1 hour by default)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: IEmailSender,
        frontend_url: str,
        reset_token_ttl: timedelta = timedelta(hours=1),
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.frontend_url = frontend_url.rstrip("/")
        self.reset_token_ttl = reset_token_ttl

    def build_reset_link(self, token: str) -> str:
        return f"{self.frontend_url}/reset-password?{urlencode({'token': token})}"

    async def execute(self, email: str) -> Result[MessageResponse]:
        """
        Execute forgot password use case.

        Args:
            email: User's email address

        Returns:
            Result with the generic message, or Error(EMAIL_DELIVERY_FAILED)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                return Return.ok(MessageResponse(message=GENERIC_MESSAGE))

            reset_tokens = ResetTokenManager(self.uow.users, self.reset_token_ttl)
            token, _ = await reset_tokens.issue_for(user)

            await self.uow.commit()

            try:
                await self.email_sender.send_password_reset(
                    user.email, self.build_reset_link(token), self.reset_token_ttl
                )
            except EmailDeliveryError:
                return Return.err(
                    Error("EMAIL_DELIVERY_FAILED", "Failed to send reset email")
                )

            logger.info(f"Password reset requested for user {user.id}")

            return Return.ok(MessageResponse(message=GENERIC_MESSAGE))
