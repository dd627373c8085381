"""batnotify CLI application.

This module provides the command-line interface: a one-shot battery check
and notification, a preflight report, an extractor for arbitrary status
text, and configuration utilities.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Final, NoReturn

import typer
import yaml
from pydantic import ValidationError

from batnotify.battery.parser import parse_reading
from batnotify.common.enums import ExitCode
from batnotify.controller import BatteryNotifier, configure_logging
from batnotify.errors import BatteryNotifyError
from batnotify.notify.formatting import format_readings
from batnotify.settings import UserSettings
from batnotify.system.commands import create_resolver
from batnotify.system.preflight import missing_tools, required_tools

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Battery status desktop notifier", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "batnotify.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
URGENCY_OPTION = typer.Option(None, "--urgency", "-u", help="low, normal or critical")
NO_NOTIFY_OPTION = typer.Option(
    False, "--no-notify", help="Print readings only; notify-send is not required"
)
TEXT_ARGUMENT = typer.Argument(None, help="Status text to parse (default: read stdin)")


def _fail(message: str, code: int) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


def _load_settings(config: Path | None, **overrides: Any) -> UserSettings:
    """Load settings and apply CLI overrides, exiting on invalid config."""
    try:
        return UserSettings.load(config).with_overrides(**overrides)
    except (FileNotFoundError, RuntimeError) as exc:
        _fail(str(exc), 1)
    except ValidationError as err:
        _fail(f"Invalid option:\n{err}", 2)


def _exit_code(settings: UserSettings, error: BatteryNotifyError) -> int:
    return int(error.code) if settings.strict_exit else int(ExitCode.OK)


@app.command()
def run(
    config: Path | None = CONFIG_OPTION,
    urgency: str | None = URGENCY_OPTION,
    no_notify: bool = NO_NOTIFY_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Read the battery once, print the readings and send a notification."""
    configure_logging(debug)
    settings = _load_settings(config, urgency=urgency)
    notifier = BatteryNotifier(settings, echo=typer.echo, notify=not no_notify)

    try:
        result = notifier.run()
    except BatteryNotifyError as exc:
        _fail(str(exc), _exit_code(settings, exc))

    if result.notification_error:
        typer.secho(result.notification_error, fg=typer.colors.RED, err=True)


@app.command()
def check(
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Report whether the status and notification utilities are installed."""
    configure_logging(debug)
    settings = _load_settings(config)
    tools = required_tools(settings)
    missing = missing_tools(tools, create_resolver(settings.resolver))

    for tool in tools:
        if tool in missing:
            typer.secho(
                f"✗ {tool.command} (install the {tool.package} package)",
                fg=typer.colors.RED,
            )
        else:
            typer.echo(f"✓ {tool.command}")

    if missing and settings.strict_exit:
        raise typer.Exit(code=int(ExitCode.MISSING_TOOL))


@app.command()
def parse(text: str | None = TEXT_ARGUMENT) -> None:
    """Extract percentage and time remaining from status text."""
    if text is None:
        text = sys.stdin.read()
    try:
        reading = parse_reading(text)
    except BatteryNotifyError as exc:
        _fail(str(exc), int(exc.code))
    for line in format_readings(reading):
        typer.echo(line)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("show")
def show_config(config: Path | None = CONFIG_OPTION):
    """Print the effective settings as YAML."""
    settings = _load_settings(config)
    typer.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False).rstrip())


# ───────────────────────── module entrypoint ────────────────────────────────
def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
