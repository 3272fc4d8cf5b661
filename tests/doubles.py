# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/doubles.py

"""
Test doubles for the mason CLI collaborators.

The doubles record every call so tests can assert on dispatch, update
lookups and API handle release without touching the network.
"""

import io
from typing import Optional

from rich.console import Console

from mason_cli.system.logger import Level, Logger

CURRENT_VERSION = "1.2.3"


class FakeUpdater:
    """VersionLookup double answering with a fixed version or error."""

    def __init__(self, latest: str = CURRENT_VERSION, error: Optional[Exception] = None):
        self.latest = latest
        self.error = error
        self.lookups: list[str] = []
        self.updates: list[tuple[str, str]] = []

    async def get_latest_version(self, package_name: str) -> str:
        self.lookups.append(package_name)
        if self.error is not None:
            raise self.error
        return self.latest

    async def update(self, package_name: str, version: str) -> None:
        self.updates.append((package_name, version))


class FakeApi:
    """ApiClient double counting close() calls."""

    def __init__(self):
        self.close_calls = 0

    @property
    def closed(self) -> bool:
        return self.close_calls > 0

    async def get_json(self, path, params=None):
        return {}

    async def close(self) -> None:
        self.close_calls += 1


class RecordingCommand:
    """Command double returning *result* or raising *error*."""

    def __init__(self, result: Optional[int] = None, error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[str, ...]] = []

    def run(self, args):
        self.calls.append(tuple(args))
        if self.error is not None:
            raise self.error
        return self.result


class Output:
    """A Logger writing into in-memory buffers."""

    def __init__(self, level: Level = Level.INFO):
        self._stdout = io.StringIO()
        self._stderr = io.StringIO()
        self.logger = Logger(
            level=level,
            console=Console(file=self._stdout, width=200, color_system=None),
            err_console=Console(file=self._stderr, width=200, color_system=None),
        )

    @property
    def stdout(self) -> str:
        return self._stdout.getvalue()

    @property
    def stderr(self) -> str:
        return self._stderr.getvalue()
