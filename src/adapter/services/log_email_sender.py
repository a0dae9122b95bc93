import logging
from datetime import timedelta

from src.app.services.email_sender import IEmailSender

logger = logging.getLogger(__name__)


class LogEmailSender(IEmailSender):
    """Development sender used when no SMTP host is configured; nothing is delivered"""

    async def send_password_reset(
        self, to_email: str, reset_link: str, valid_for: timedelta
    ) -> None:
        logger.warning(f"SMTP not configured, password reset email to {to_email} not delivered")
