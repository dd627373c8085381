"""System module for locating the external utilities."""

# Re-export commonly used classes for cleaner imports
from batnotify.system.commands import (
    CommandResolver,
    PathResolver,
    StaticResolver,
    WhichResolver,
    command_exists,
    create_resolver,
)
from batnotify.system.preflight import (
    RequiredTool,
    check_requirements,
    missing_tools,
    required_tools,
)

# Define the public API
__all__ = [
    "CommandResolver",
    "PathResolver",
    "RequiredTool",
    "StaticResolver",
    "WhichResolver",
    "check_requirements",
    "command_exists",
    "create_resolver",
    "missing_tools",
    "required_tools",
]
