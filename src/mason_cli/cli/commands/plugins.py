# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/cli/commands/plugins.py

"""
Subcommands provided by other distributions.

A provider exposes a factory under the ``mason_cli.commands`` entry-point
group, named after the subcommand. The factory receives the CommandContext
and returns an object satisfying the Command protocol.
"""

import inspect
from importlib import metadata
from typing import Optional, Sequence

from mason_cli.core.context import CommandContext
from mason_cli.core.protocols import CommandResult
from mason_cli.system.exceptions import MasonError

ENTRY_POINT_GROUP = "mason_cli.commands"


def find_provider(name: str) -> Optional[metadata.EntryPoint]:
    for entry_point in metadata.entry_points().select(group=ENTRY_POINT_GROUP):
        if entry_point.name == name:
            return entry_point
    return None


class PluginCommand:
    """Dispatch table entry whose handler lives in a plugin."""

    def __init__(self, name: str, context: CommandContext):
        self.name = name
        self.context = context

    async def run(self, args: Sequence[str]) -> CommandResult:
        entry_point = find_provider(self.name)
        if entry_point is None:
            raise MasonError(
                f"The '{self.name}' command is not installed. "
                f"Install a package providing '{self.name}' in the {ENTRY_POINT_GROUP} entry-point group."
            )

        self.context.logger.detail(f"Loading '{self.name}' from {entry_point.value}")
        factory = entry_point.load()
        command = factory(self.context)
        result = command.run(args)
        if inspect.isawaitable(result):
            result = await result
        return result
