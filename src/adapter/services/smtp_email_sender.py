"""
SMTP email sender.

Uses aiosmtplib for asynchronous delivery via SMTP.
"""

import logging
from datetime import timedelta
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import aiosmtplib

from src.app.services.email_sender import EmailDeliveryError, IEmailSender

logger = logging.getLogger(__name__)

RESET_SUBJECT = "Password Reset Request"

RESET_TEXT_BODY = """You requested to reset your password.

Open the link below to choose a new password:
{link}

This link will expire in {validity}.
If you didn't request this, please ignore this email.
"""

RESET_HTML_BODY = """<html>
  <body>
    <h2>Password Reset Request</h2>
    <p>You requested to reset your password.</p>
    <p>Click the link below to reset your password:</p>
    <p><a href="{link}">Reset Password</a></p>
    <p>Or copy and paste this link in your browser:</p>
    <p>{link}</p>
    <p>This link will expire in {validity}.</p>
    <p>If you didn't request this, please ignore this email.</p>
  </body>
</html>
"""


def describe_validity(valid_for: timedelta) -> str:
    """Human wording for a link lifetime, such as 1 hour or 30 minutes"""
    minutes = max(int(valid_for.total_seconds() // 60), 1)
    if minutes % 60 == 0:
        hours = minutes // 60
        return "1 hour" if hours == 1 else f"{hours} hours"
    return "1 minute" if minutes == 1 else f"{minutes} minutes"


class SmtpEmailSender(IEmailSender):
    """Delivers mail through an SMTP relay"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_email: str,
        use_tls: bool = True,
        timeout: int = 10,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_email = from_email
        self.use_tls = use_tls
        self.timeout = timeout

    def build_password_reset_message(
        self, to_email: str, reset_link: str, valid_for: timedelta
    ) -> MIMEMultipart:
        validity = describe_validity(valid_for)
        message = MIMEMultipart("alternative")
        message["Subject"] = RESET_SUBJECT
        message["From"] = self.from_email
        message["To"] = to_email
        message.attach(MIMEText(RESET_TEXT_BODY.format(link=reset_link, validity=validity), "plain"))
        message.attach(MIMEText(RESET_HTML_BODY.format(link=reset_link, validity=validity), "html"))
        return message

    async def send_password_reset(
        self, to_email: str, reset_link: str, valid_for: timedelta
    ) -> None:
        message = self.build_password_reset_message(to_email, reset_link, valid_for)
        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                start_tls=self.use_tls,
                timeout=self.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.error(f"Failed to send password reset email via {self.host}: {exc}")
            raise EmailDeliveryError(str(exc)) from exc
