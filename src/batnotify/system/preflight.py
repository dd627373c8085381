"""Preflight checks for the external utilities batnotify drives."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from batnotify.errors import MissingToolError
from batnotify.settings import UserSettings
from batnotify.system.commands import CommandResolver

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequiredTool:
    """An executable and the distribution package that provides it."""

    command: str
    package: str

    @classmethod
    def status_tool(cls, settings: UserSettings) -> RequiredTool:
        return cls(settings.status_command, settings.status_package)

    @classmethod
    def notify_tool(cls, settings: UserSettings) -> RequiredTool:
        return cls(settings.notify_command, settings.notify_package)


def required_tools(settings: UserSettings, notify: bool = True) -> list[RequiredTool]:
    """Return the tools a run needs, status utility first."""
    tools = [RequiredTool.status_tool(settings)]
    if notify:
        tools.append(RequiredTool.notify_tool(settings))
    return tools


def check_requirements(tools: Iterable[RequiredTool], resolver: CommandResolver) -> None:
    """Check each tool in order and stop at the first missing one.

    Raises:
        MissingToolError: For the first tool the resolver cannot find
    """
    for tool in tools:
        if not resolver.is_available(tool.command):
            raise MissingToolError(tool.command, tool.package)
        logger.debug("Found required command %s", tool.command)


def missing_tools(tools: Iterable[RequiredTool], resolver: CommandResolver) -> list[RequiredTool]:
    """Return every tool the resolver cannot find, without raising."""
    return [tool for tool in tools if not resolver.is_available(tool.command)]
