"""Desktop notification senders."""

from __future__ import annotations

import logging
import subprocess
from typing import Final, Protocol, runtime_checkable

from batnotify.constants import DEFAULT_URGENCY, NOTIFY_COMMAND
from batnotify.errors import NotificationError

logger: Final = logging.getLogger(__name__)


@runtime_checkable
class Notifier(Protocol):
    """Protocol for notification senders.

    ``send`` returns as soon as the notification is dispatched. It does not
    report whether the desktop actually displayed it.
    """

    def send(self, message: str) -> None:
        """Dispatch ``message``.

        Raises:
            NotificationError: If the notification could not be dispatched
        """
        ...


class NotifySendNotifier:
    """Send notifications with ``notify-send``, fire-and-forget.

    The child process is spawned and never waited on; its exit status is not
    inspected. Only a failure to spawn is reported.
    """

    def __init__(self, command: str = NOTIFY_COMMAND, urgency: str = DEFAULT_URGENCY) -> None:
        """Initialize the notifier.

        Args:
            command: Notification executable
            urgency: Value passed with ``-u`` (low, normal or critical)
        """
        self.command = command
        self.urgency = urgency

    def argv(self, message: str) -> list[str]:
        return [self.command, "-u", self.urgency, message]

    def send(self, message: str) -> None:
        cmd = self.argv(message)
        logger.debug("Spawning %s", cmd)
        try:
            subprocess.Popen(cmd)
        except OSError as exc:
            raise NotificationError(self.command, exc) from exc


class NullNotifier:
    """Notifier that only logs, used with ``--no-notify``."""

    def send(self, message: str) -> None:
        logger.info("Notification suppressed: %s", message)


class MockNotifier:
    """Mock implementation of Notifier for testing."""

    def __init__(self, error: NotificationError | None = None) -> None:
        self.sent: list[str] = []
        self.error = error

    def send(self, message: str) -> None:
        """Record the message, or raise the configured error."""
        if self.error is not None:
            raise self.error
        self.sent.append(message)

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.sent = []
