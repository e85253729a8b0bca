"""Email channel port — abstract interface for mail transports."""

from abc import ABC, abstractmethod

from notifications.channel.message import MailMessage
from shared.exceptions import TransientDeliveryError


class DeliveryFailed(TransientDeliveryError):
    """The transport refused or failed to deliver a message."""


class MailPort(ABC):
    """Abstract interface for mail transport adapters."""

    def create(self) -> MailMessage:
        """Return an empty message for this transport."""
        return MailMessage()

    @abstractmethod
    def send(self, message: MailMessage) -> dict:
        """Send a composed message.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
