"""Notifier registry: builds a notifier for a channel.

Args accept either a NotificationChannel member or its value ("Email", "SMS").
"""

from checkout.notification.email import Email
from checkout.notification.port import NotificationChannel, Notifier
from checkout.notification.sms import Sms
from checkout.sink.port import OutputSink

_NOTIFIERS: dict[NotificationChannel, type[Notifier]] = {
    NotificationChannel.EMAIL: Email,
    NotificationChannel.SMS: Sms,
}


def get_notifier(channel: NotificationChannel | str, sink: OutputSink | None = None) -> Notifier:
    """Return a notifier for the given channel."""
    try:
        notifier_class = _NOTIFIERS[NotificationChannel(channel)]
    except ValueError:
        raise ValueError(f"Unknown channel type: {channel}") from None
    return notifier_class(sink=sink)
