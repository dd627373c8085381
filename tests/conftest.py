from __future__ import annotations

import subprocess
from typing import Any

import pytest

from batnotify.settings import UserSettings


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real config files and BATNOTIFY_CONFIG out of every test."""
    monkeypatch.delenv("BATNOTIFY_CONFIG", raising=False)
    monkeypatch.setattr(UserSettings, "DEFAULT_CONFIG_PATHS", [])


class FakeSubprocess:
    """Stand-in for the subprocess module that records calls.

    ``run`` returns a CompletedProcess built from the configured values;
    ``Popen`` records the argv and returns a placeholder. Either raises
    ``error`` when it is set.
    """

    def __init__(
        self,
        returncode: int = 0,
        stdout: bytes = b"",
        stderr: bytes = b"",
        error: Exception | None = None,
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def run(self, cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[bytes]:
        self.calls.append({"cmd": cmd, "kwargs": kwargs})
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)

    def Popen(self, cmd: list[str], **kwargs: Any) -> object:
        self.calls.append({"cmd": cmd, "kwargs": kwargs})
        if self.error is not None:
            raise self.error
        return object()


@pytest.fixture
def fake_subprocess() -> type[FakeSubprocess]:
    return FakeSubprocess
