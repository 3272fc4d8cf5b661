# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/conftest.py

"""Shared fixtures for the mason CLI test suite."""

from typing import Optional

import pytest

from mason_cli.cli.grammar import SubcommandDescriptor
from mason_cli.cli.runner import CommandRunner
from mason_cli.config.manager import UserConfig
from tests.doubles import CURRENT_VERSION, FakeApi, FakeUpdater, Output


@pytest.fixture
def output():
    return Output()


@pytest.fixture
def updater():
    return FakeUpdater()


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def make_runner(output, updater, api):
    """Build a CommandRunner wired to the test doubles.

    Keyword arguments map command names to handlers; the remaining
    collaborators are the shared fixtures.
    """
    def _make_runner(config: Optional[UserConfig] = None, **handlers) -> CommandRunner:
        commands = [
            SubcommandDescriptor(name, f"The {name} command.", handler)
            for name, handler in handlers.items()
        ]
        return CommandRunner(
            logger=output.logger,
            updater=updater,
            api=api,
            config=config,
            commands=commands,
            version=CURRENT_VERSION,
        )
    return _make_runner
