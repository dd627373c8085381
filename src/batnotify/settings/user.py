"""User-configurable settings loaded from an optional YAML file."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, ClassVar, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from batnotify.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_URGENCY,
    NOTIFY_COMMAND,
    NOTIFY_PACKAGE,
    STATUS_COMMAND,
    STATUS_FLAG,
    STATUS_PACKAGE,
)

# Load environment variables from .env file(s)
load_dotenv()

Urgency = Literal["low", "normal", "critical"]


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """Settings for the status and notification utilities.

    Every field has a default, so batnotify runs without a config file.
    Values in the YAML file (and CLI options) override the defaults.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("batnotify.yaml"),
        Path("~/.config/batnotify/config.yaml").expanduser(),
        Path("/etc/batnotify/config.yaml"),
    ]

    # Battery status utility
    status_command: str = Field(STATUS_COMMAND, min_length=1, description="Battery status executable")
    status_flag: str = Field(STATUS_FLAG, description="Flag requesting battery-only output")
    status_package: str = Field(STATUS_PACKAGE, description="Package that provides the status tool")

    # Desktop notification utility
    notify_command: str = Field(NOTIFY_COMMAND, min_length=1, description="Notification executable")
    notify_package: str = Field(NOTIFY_PACKAGE, description="Package that provides the notifier")
    urgency: Urgency = Field(DEFAULT_URGENCY, description="Urgency passed with -u")

    # Behaviour
    resolver: Literal["path", "which"] = Field(
        "path", description="How executables are looked up: in-process PATH search or `which`"
    )
    strict_exit: bool = Field(
        True,
        description="Exit non-zero on failures; false keeps the legacy always-zero status",
    )

    # ---- validators ----
    @field_validator("status_command", "notify_command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        v = v.strip()
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("command must be a single executable name without whitespace")
        return v

    def with_overrides(self, **overrides: Any) -> UserSettings:
        """Return a copy with the non-None overrides applied and re-validated."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).model_validate(data)

    @classmethod
    def find_config(cls) -> Path | None:
        """Locate the config file from the environment or the default paths.

        Raises:
            FileNotFoundError: If BATNOTIFY_CONFIG points at a missing file
        """
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object, built-in defaults when no file exists

        Raises:
            FileNotFoundError: If an explicitly named config file does not exist
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            path = cls.find_config()
            if path is None:
                return cls()
        elif not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text(encoding="utf-8"))
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
