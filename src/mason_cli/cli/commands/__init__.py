# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/cli/commands/__init__.py

"""
The default dispatch table.

- update: built in, self-update through pip
- completion: built in, registered by the runner since it needs the grammar
- everything else: PluginCommand, resolved through entry points
"""

from mason_cli import __version__
from mason_cli.cli.grammar import SubcommandDescriptor
from mason_cli.cli.commands.plugins import PluginCommand
from mason_cli.cli.commands.update import UPDATE_COMMAND, UpdateCommand
from mason_cli.core.context import CommandContext

PLUGIN_COMMANDS = {
    "add": "Adds a brick from a local or remote source.",
    "cache": "Interact with mason cache.",
    "bundle": "Generates a bundle from a brick template.",
    "get": "Gets all bricks in the nearest mason.yaml.",
    "init": "Initialize mason in the current directory.",
    "list": "Lists installed bricks.",
    "login": "Log into brickhub.dev.",
    "logout": "Log out of brickhub.dev.",
    "make": "Generate code using an existing brick template.",
    "new": "Creates a new brick template.",
    "publish": "Publish the current brick to brickhub.dev.",
    "remove": "Removes a brick.",
    "search": "Search published bricks on brickhub.dev.",
    "unbundle": "Generates a brick template from a bundle.",
}


def default_commands(context: CommandContext, version: str = __version__) -> list[SubcommandDescriptor]:
    descriptors = [
        SubcommandDescriptor(name, help_text, PluginCommand(name, context))
        for name, help_text in PLUGIN_COMMANDS.items()
    ]
    descriptors.append(SubcommandDescriptor(UPDATE_COMMAND, "Update mason.", UpdateCommand(context, version)))
    descriptors.append(
        SubcommandDescriptor("upgrade", "Upgrade bricks to their latest versions.", PluginCommand("upgrade", context))
    )
    return descriptors
