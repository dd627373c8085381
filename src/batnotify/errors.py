"""Exception classes for battery status and notification failures.

Every failure of a run is terminal. The CLI catches ``BatteryNotifyError``
once, prints its message to stderr and maps ``code`` to the exit status.
"""

from __future__ import annotations

from typing import Optional

from batnotify.common.enums import ExitCode


class BatteryNotifyError(Exception):
    """Base class for all batnotify failures.

    Carries the exit code that a strict run terminates with, and the
    human-readable message printed to stderr.
    """

    code: ExitCode = ExitCode.OK

    def __init__(self, message: str, code: Optional[ExitCode] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            code: Override for the class default exit code
        """
        super().__init__(message)
        self.message: str = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class MissingToolError(BatteryNotifyError):
    """Raised when a required executable cannot be resolved on PATH."""

    code = ExitCode.MISSING_TOOL

    def __init__(self, command: str, package: str) -> None:
        super().__init__(
            f"Error: '{command}' command not found. Please install {package} package."
        )
        self.command = command
        self.package = package


class StatusCommandError(BatteryNotifyError):
    """Raised when the battery status utility fails to start or exits non-zero."""

    code = ExitCode.STATUS_FAILED

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize with process failure details.

        Args:
            message: Description of the failure
            returncode: Exit status, or None when the process never started
            stderr: Decoded error stream of the process
            original_error: The OS error raised while spawning, if any
        """
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
        self.original_error = original_error

    @classmethod
    def spawn_failed(cls, command: str, error: OSError) -> StatusCommandError:
        return cls(f"Failed to execute `{command}` command: {error}", original_error=error)

    @classmethod
    def exited(cls, command: str, returncode: int, stderr: str) -> StatusCommandError:
        return cls(f"{command} command failed: {stderr}", returncode=returncode, stderr=stderr)


class NoBatteryInfoError(BatteryNotifyError):
    """Raised when the status utility printed nothing but whitespace."""

    code = ExitCode.NO_BATTERY

    def __init__(self, message: str = "No battery information found.") -> None:
        super().__init__(message)


class ParseError(BatteryNotifyError):
    """Raised when the status text holds no percentage/time pair."""

    code = ExitCode.PARSE_FAILED

    def __init__(self, text: str = "", message: str = "Failed to parse battery info.") -> None:
        super().__init__(message)
        self.text = text


class NotificationError(BatteryNotifyError):
    """Raised when the notification utility could not be spawned.

    Readings are already on stdout when this happens, so the run keeps
    exit code 0.
    """

    code = ExitCode.OK

    def __init__(self, command: str, original_error: OSError) -> None:
        super().__init__(f"Failed to send notification: {original_error}")
        self.command = command
        self.original_error = original_error
