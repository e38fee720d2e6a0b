"""Notifier port: abstract interface for customer notifications.

Notifiers are independent of Order: the caller decides when to notify
and what to say.
"""

from abc import ABC, abstractmethod
from enum import Enum

from checkout.sink import SinkEmitter


class NotificationChannel(Enum):
    EMAIL = "Email"
    SMS = "SMS"


class Notifier(SinkEmitter, ABC):
    """Abstract interface for notification channels."""

    channel: NotificationChannel

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Send a message to the customer, prefixed with the channel label."""
        ...
