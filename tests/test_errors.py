import pytest

from batnotify.common.enums import ExitCode
from batnotify.errors import (
    BatteryNotifyError,
    MissingToolError,
    NoBatteryInfoError,
    NotificationError,
    ParseError,
    StatusCommandError,
)


@pytest.mark.parametrize(
    "err, code",
    [
        (MissingToolError("acpi", "acpi"), ExitCode.MISSING_TOOL),
        (StatusCommandError.exited("acpi", 1, "boom"), ExitCode.STATUS_FAILED),
        (NoBatteryInfoError(), ExitCode.NO_BATTERY),
        (ParseError(), ExitCode.PARSE_FAILED),
        (NotificationError("notify-send", OSError("x")), ExitCode.OK),
    ],
)
def test_exit_codes(err: BatteryNotifyError, code: ExitCode) -> None:
    assert isinstance(err, BatteryNotifyError)
    assert err.code == code


def test_missing_tool_message() -> None:
    err = MissingToolError("notify-send", "libnotify-bin")
    assert str(err) == "Error: 'notify-send' command not found. Please install libnotify-bin package."


def test_status_command_spawn_failed_wraps_exception() -> None:
    try:
        raise PermissionError(13, "Permission denied")
    except PermissionError as e:
        err = StatusCommandError.spawn_failed("acpi", e)
        assert str(err) == "Failed to execute `acpi` command: [Errno 13] Permission denied"
        assert err.original_error is e
        assert err.returncode is None


def test_code_override() -> None:
    err = BatteryNotifyError("custom", code=ExitCode.PARSE_FAILED)
    assert err.code == ExitCode.PARSE_FAILED
    assert str(err) == "custom"
    assert BatteryNotifyError("plain").code == ExitCode.OK
