"""Shared enums used across batnotify packages."""

from batnotify.common.enums import ExitCode

__all__ = ["ExitCode"]
