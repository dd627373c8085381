"""Core controller for batnotify."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from batnotify.battery.models import BatteryReading
from batnotify.battery.parser import parse_reading
from batnotify.battery.reader import AcpiReader, StatusReader
from batnotify.constants import LOG_FORMAT
from batnotify.errors import NotificationError
from batnotify.notify.formatting import format_message, format_readings
from batnotify.notify.notifier import Notifier, NotifySendNotifier, NullNotifier
from batnotify.settings import UserSettings
from batnotify.system.commands import CommandResolver, create_resolver
from batnotify.system.preflight import check_requirements, required_tools

logger: Final = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging; quiet unless debugging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
    )


@dataclass
class RunResult:
    """Outcome of a run that got as far as printing the readings."""

    reading: BatteryReading
    notified: bool = False
    notification_error: str | None = None


class BatteryNotifier:
    """Main controller class for batnotify.

    One run is strictly linear:
    - check the status utility, then the notification utility, are on PATH
    - read the status text
    - extract percentage and time remaining
    - print both readings
    - dispatch the desktop notification without waiting for it

    Every step before the notification raises a ``BatteryNotifyError`` on
    failure and nothing after it runs. All external collaborators can be
    injected.
    """

    def __init__(
        self,
        settings: UserSettings | None = None,
        resolver: CommandResolver | None = None,
        reader: StatusReader | None = None,
        notifier: Notifier | None = None,
        echo: Callable[[str], object] = print,
        notify: bool = True,
    ) -> None:
        """Initialize the controller.

        Args:
            settings: User settings (defaults when None)
            resolver: Optional custom command resolver
            reader: Optional custom status reader
            notifier: Optional custom notifier
            echo: Callable that writes one line to stdout
            notify: When False, only log the message and skip the notifier preflight check
        """
        self.settings = settings or UserSettings()
        self.resolver = resolver or create_resolver(self.settings.resolver)
        self.reader = reader or AcpiReader(self.settings.status_command, self.settings.status_flag)
        if notifier is None:
            notifier = (
                NotifySendNotifier(self.settings.notify_command, self.settings.urgency)
                if notify
                else NullNotifier()
            )
        self.notifier = notifier
        self.echo = echo
        self.notify = notify

    def preflight(self) -> None:
        """Raise MissingToolError for the first required tool that is missing."""
        check_requirements(required_tools(self.settings, notify=self.notify), self.resolver)

    def read(self) -> BatteryReading:
        """Read the status text and extract the reading."""
        return parse_reading(self.reader.read())

    def run(self) -> RunResult:
        """Run one full cycle.

        Returns:
            The reading and whether the notification was dispatched

        Raises:
            MissingToolError: If a required utility is not on PATH
            StatusCommandError: If the status utility failed
            NoBatteryInfoError: If the status utility printed nothing
            ParseError: If the status text could not be parsed
        """
        self.preflight()
        reading = self.read()

        for line in format_readings(reading):
            self.echo(line)

        result = RunResult(reading=reading)
        try:
            self.notifier.send(format_message(reading))
        except NotificationError as exc:
            logger.debug("Notification dispatch failed: %s", exc.original_error)
            result.notification_error = str(exc)
        else:
            result.notified = self.notify
        return result
