"""Executable lookup on the current search path."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Final, Literal, Protocol, runtime_checkable

logger: Final = logging.getLogger(__name__)


@runtime_checkable
class CommandResolver(Protocol):
    """Protocol for objects that decide whether a command is runnable."""

    def is_available(self, name: str) -> bool:
        """Return True if ``name`` resolves to an executable.

        Implementations never raise; any lookup failure means "not found".
        """
        ...


class PathResolver:
    """Search PATH in-process, the way a shell would."""

    def __init__(self, path: str | None = None) -> None:
        """Initialize the resolver.

        Args:
            path: Search path to use instead of the PATH environment variable
        """
        self.path = path

    def is_available(self, name: str) -> bool:
        try:
            return shutil.which(name, path=self.path) is not None
        except (OSError, ValueError) as exc:
            logger.debug("PATH lookup for %r failed: %s", name, exc)
            return False


class WhichResolver:
    """Ask the ``which`` utility, treating exit status 0 as found."""

    def __init__(self, which: str = "which") -> None:
        self.which = which

    def is_available(self, name: str) -> bool:
        try:
            result = subprocess.run(
                [self.which, name],
                capture_output=True,
                check=False,
            )
        except (OSError, ValueError) as exc:
            logger.debug("`%s %s` could not run: %s", self.which, name, exc)
            return False
        return result.returncode == 0


class StaticResolver:
    """Resolver backed by a fixed set of names, for tests and dry runs."""

    def __init__(self, available: set[str] | None = None) -> None:
        self.available = set(available or ())
        self.lookups: list[str] = []

    def is_available(self, name: str) -> bool:
        self.lookups.append(name)
        return name in self.available


def create_resolver(kind: Literal["path", "which"] = "path") -> CommandResolver:
    """Return the resolver selected in settings."""
    if kind == "which":
        return WhichResolver()
    return PathResolver()


def command_exists(name: str, resolver: CommandResolver | None = None) -> bool:
    """Convenience check using the default PATH resolver."""
    return (resolver or PathResolver()).is_available(name)
