"""Battery status reader backed by the ``acpi`` utility."""

from __future__ import annotations

import logging
import subprocess
from typing import Final, Protocol, runtime_checkable

from batnotify.constants import STATUS_COMMAND, STATUS_FLAG
from batnotify.errors import NoBatteryInfoError, StatusCommandError

logger: Final = logging.getLogger(__name__)


@runtime_checkable
class StatusReader(Protocol):
    """Protocol for sources of raw battery status text."""

    def read(self) -> str:
        """Return the status text.

        Raises:
            StatusCommandError: If the source could not be queried
            NoBatteryInfoError: If the source reported nothing
        """
        ...


def decode_output(data: bytes | None) -> str:
    """Decode process output as UTF-8, replacing invalid byte sequences."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


class AcpiReader:
    """Run the status utility once and return its decoded stdout."""

    def __init__(self, command: str = STATUS_COMMAND, flag: str = STATUS_FLAG) -> None:
        """Initialize the reader.

        Args:
            command: Status executable
            flag: Argument requesting battery-only output
        """
        self.command = command
        self.flag = flag

    @property
    def argv(self) -> list[str]:
        return [self.command, self.flag] if self.flag else [self.command]

    def read(self) -> str:
        """Run the status utility and return its stdout.

        Returns:
            Decoded standard output, untrimmed

        Raises:
            StatusCommandError: If the utility cannot start or exits non-zero
            NoBatteryInfoError: If stdout is empty or whitespace only
        """
        logger.debug("Running %s", " ".join(self.argv))
        try:
            result = subprocess.run(self.argv, capture_output=True, check=False)
        except OSError as exc:
            raise StatusCommandError.spawn_failed(self.command, exc) from exc

        if result.returncode != 0:
            raise StatusCommandError.exited(
                self.command, result.returncode, decode_output(result.stderr)
            )

        output = decode_output(result.stdout)
        logger.debug("%s output: %r", self.command, output)
        if not output.strip():
            raise NoBatteryInfoError()
        return output


class StaticReader:
    """Reader that returns fixed text, for tests and the ``parse`` command."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.read_count = 0

    def read(self) -> str:
        self.read_count += 1
        if not self.text.strip():
            raise NoBatteryInfoError()
        return self.text
