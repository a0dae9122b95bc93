from abc import ABC, abstractmethod
from datetime import timedelta


class EmailDeliveryError(Exception):
    """Outbound mail could not be handed to the transport"""


class IEmailSender(ABC):
    """Outbound email port - application layer"""

    @abstractmethod
    async def send_password_reset(
        self, to_email: str, reset_link: str, valid_for: timedelta
    ) -> None:
        """Send the password reset link to a user; valid_for is how long the link works"""
        pass
