from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit status for each terminal outcome of a run.

    Codes 1 and 2 are left to Typer/Click (uncaught errors and usage errors).
    """

    OK = 0
    MISSING_TOOL = 3  # status or notification utility not on PATH
    STATUS_FAILED = 4  # status utility could not start or exited non-zero
    NO_BATTERY = 5  # status utility printed nothing
    PARSE_FAILED = 6  # percentage/time pattern did not match
