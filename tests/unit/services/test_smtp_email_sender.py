from datetime import timedelta
from unittest.mock import AsyncMock

import aiosmtplib
import pytest

from src.adapter.services.smtp_email_sender import SmtpEmailSender, describe_validity
from src.app.services.email_sender import EmailDeliveryError


@pytest.fixture
def sender():
    return SmtpEmailSender(
        host="smtp.acme.com",
        port=587,
        username="forum",
        password="secret",
        from_email="no-reply@acme.com",
    )


def _bodies(message):
    return [part.get_payload(decode=True).decode() for part in message.get_payload()]


@pytest.mark.parametrize(
    "valid_for, wording",
    [
        (timedelta(hours=1), "1 hour"),
        (timedelta(minutes=120), "2 hours"),
        (timedelta(minutes=30), "30 minutes"),
        (timedelta(minutes=1), "1 minute"),
        (timedelta(seconds=10), "1 minute"),
    ],
)
def test_describe_validity(valid_for, wording):
    assert describe_validity(valid_for) == wording


def test_message_states_configured_lifetime(sender):
    message = sender.build_password_reset_message(
        "a@acme.com", "http://app/reset-password?token=abc", timedelta(minutes=15)
    )

    assert message["Subject"] == "Password Reset Request"
    assert message["To"] == "a@acme.com"
    text, html = _bodies(message)
    for body in (text, html):
        assert "http://app/reset-password?token=abc" in body
        assert "This link will expire in 15 minutes." in body
        assert "1 hour" not in body


@pytest.mark.asyncio
async def test_send_failure_becomes_delivery_error(sender, monkeypatch):
    monkeypatch.setattr(
        aiosmtplib, "send", AsyncMock(side_effect=aiosmtplib.SMTPException("relay down"))
    )

    with pytest.raises(EmailDeliveryError):
        await sender.send_password_reset("a@acme.com", "http://app/x", timedelta(hours=1))
