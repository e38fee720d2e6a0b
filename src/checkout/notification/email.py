"""Email notifier."""

import structlog

from checkout.notification.port import NotificationChannel, Notifier

logger = structlog.get_logger(__name__)


class Email(Notifier):
    channel = NotificationChannel.EMAIL

    def send_notification(self, message: str) -> None:
        self.emit(f"Email notification: {message}")
        logger.info("Notification sent", channel=self.channel.value)
