"""Tests for command resolution and preflight checks."""

from __future__ import annotations

import pytest

from batnotify.errors import MissingToolError
from batnotify.settings import UserSettings
from batnotify.system import commands
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

NONEXISTENT = "nonexistentcommand123"


def test_path_resolver_finds_ls() -> None:
    assert PathResolver().is_available("ls") is True
    assert command_exists("ls") is True


def test_path_resolver_rejects_nonexistent_command() -> None:
    assert PathResolver().is_available(NONEXISTENT) is False
    assert command_exists(NONEXISTENT) is False


def test_path_resolver_uses_custom_search_path(tmp_path) -> None:
    tool = tmp_path / "fake-acpi"
    tool.write_text("#!/bin/sh\n")
    tool.chmod(0o755)

    assert PathResolver(path=str(tmp_path)).is_available("fake-acpi") is True
    assert PathResolver(path=str(tmp_path)).is_available("ls") is False


def test_path_resolver_fails_closed(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_which(*_a, **_kw):
        raise OSError("boom")

    monkeypatch.setattr(commands.shutil, "which", broken_which)
    assert PathResolver().is_available("ls") is False


def test_which_resolver_uses_exit_status(monkeypatch: pytest.MonkeyPatch, fake_subprocess) -> None:
    found = fake_subprocess(returncode=0, stdout=b"/usr/bin/acpi\n")
    monkeypatch.setattr(commands, "subprocess", found)
    assert WhichResolver().is_available("acpi") is True
    assert found.calls[0]["cmd"] == ["which", "acpi"]

    missing = fake_subprocess(returncode=1)
    monkeypatch.setattr(commands, "subprocess", missing)
    assert WhichResolver().is_available("acpi") is False


def test_which_resolver_fails_closed_when_which_missing(
    monkeypatch: pytest.MonkeyPatch, fake_subprocess
) -> None:
    fake = fake_subprocess(error=FileNotFoundError("which"))
    monkeypatch.setattr(commands, "subprocess", fake)
    assert WhichResolver().is_available("ls") is False


def test_create_resolver() -> None:
    assert isinstance(create_resolver("path"), PathResolver)
    assert isinstance(create_resolver("which"), WhichResolver)
    assert isinstance(create_resolver(), CommandResolver)


def test_required_tools_defaults() -> None:
    settings = UserSettings()
    assert required_tools(settings) == [
        RequiredTool("acpi", "acpi"),
        RequiredTool("notify-send", "libnotify-bin"),
    ]
    assert required_tools(settings, notify=False) == [RequiredTool("acpi", "acpi")]


def test_check_requirements_passes_when_all_present() -> None:
    resolver = StaticResolver({"acpi", "notify-send"})
    check_requirements(required_tools(UserSettings()), resolver)
    assert resolver.lookups == ["acpi", "notify-send"]


@pytest.mark.parametrize(
    "available, command, package",
    [
        (set(), "acpi", "acpi"),
        ({"notify-send"}, "acpi", "acpi"),
        ({"acpi"}, "notify-send", "libnotify-bin"),
    ],
)
def test_check_requirements_reports_first_missing(
    available: set[str], command: str, package: str
) -> None:
    with pytest.raises(MissingToolError) as exc_info:
        check_requirements(required_tools(UserSettings()), StaticResolver(available))

    err = exc_info.value
    assert err.command == command
    assert err.package == package
    assert str(err) == f"Error: '{command}' command not found. Please install {package} package."


def test_check_requirements_stops_at_first_missing() -> None:
    resolver = StaticResolver(set())
    with pytest.raises(MissingToolError):
        check_requirements(required_tools(UserSettings()), resolver)
    assert resolver.lookups == ["acpi"]


def test_missing_tools_lists_everything() -> None:
    tools = required_tools(UserSettings())
    assert missing_tools(tools, StaticResolver(set())) == tools
    assert missing_tools(tools, StaticResolver({"acpi"})) == [tools[1]]
    assert missing_tools(tools, StaticResolver({"acpi", "notify-send"})) == []
