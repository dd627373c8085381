"""Notification formatting and dispatch."""

from batnotify.notify.formatting import format_message, format_readings
from batnotify.notify.notifier import MockNotifier, Notifier, NotifySendNotifier, NullNotifier

__all__ = [
    "MockNotifier",
    "Notifier",
    "NotifySendNotifier",
    "NullNotifier",
    "format_message",
    "format_readings",
]
