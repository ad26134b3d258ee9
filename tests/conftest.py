#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Pytest configuration for tests."""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest


def pytest_configure(config: Any) -> None:
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "subprocess: mark test as spawning a real child process"
    )


class RecordingRunner:
    """Command runner that records invocations instead of executing them.

    Exit statuses are handed out in order from `statuses`; once exhausted,
    every further command succeeds.
    """

    def __init__(self, statuses: Sequence[int] = ()) -> None:
        """Initialize with the exit statuses to return, in call order."""
        self.statuses = list(statuses)
        self.commands: list[list[str]] = []

    def run(self, command: Sequence[str]) -> int:
        """Record command and return the next programmed status."""
        self.commands.append(list(command))
        if self.statuses:
            return self.statuses.pop(0)
        return 0

    @property
    def source_files(self) -> list[str]:
        """Base names of the source file argument of each recorded command."""
        return [Path(command[-1]).name for command in self.commands]


@pytest.fixture
def recording_runner() -> Callable[..., RecordingRunner]:
    """Return a factory for RecordingRunner instances."""
    return RecordingRunner


@pytest.fixture
def make_install(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that creates vendor installation directories.

    The factory takes a directory name (e.g. 'iCEcube2.2020.12') and creates
    it under a shared search root, with a vhdl/ subdirectory unless
    with_vhdl=False.
    """
    search_root = tmp_path / "lscc"
    search_root.mkdir()

    def _make(name: str, with_vhdl: bool = True) -> Path:
        install = search_root / name
        install.mkdir()
        if with_vhdl:
            (install / "vhdl").mkdir()
        return install

    return _make


@pytest.fixture
def search_root(tmp_path: Path, make_install: Callable[..., Path]) -> Path:
    """Search root used by make_install."""
    return tmp_path / "lscc"


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Empty directory standing in for the user's home."""
    home = tmp_path / "home"
    home.mkdir()
    return home
