"""SMS notifier."""

import structlog

from checkout.notification.port import NotificationChannel, Notifier

logger = structlog.get_logger(__name__)


class Sms(Notifier):
    channel = NotificationChannel.SMS

    def send_notification(self, message: str) -> None:
        self.emit(f"SMS notification: {message}")
        logger.info("Notification sent", channel=self.channel.value)
