# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/cli/grammar.py

"""
Top-level argument grammar and dispatch table.

The grammar is declared as a Typer app whose commands only record what was
matched: the top-level callback stores ``--version``/``--verbose`` and each
registered subcommand stores its name and residual arguments on the shared
ParsedInvocation. Running the handlers is left to the CommandRunner.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

import click
import typer

from mason_cli import DESCRIPTION, EXECUTABLE_NAME
from mason_cli.core.protocols import Command
from mason_cli.system.exceptions import ArgumentsError, DuplicateCommandError
from mason_cli.system.failures import CLICK_USAGE_ERRORS, click_usage

# Subcommands own their grammar, so every argument after the name
# (including --help and unknown options) is passed through untouched
PASSTHROUGH_SETTINGS = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": [],
}


@dataclass
class ParsedInvocation:
    """Result of parsing one set of process arguments."""
    version: bool = False
    verbose: bool = False
    command: Optional[str] = None
    args: tuple[str, ...] = ()
    help_shown: bool = False


@dataclass(frozen=True)
class SubcommandDescriptor:
    name: str
    help: str
    handler: Command


def _record_flags(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Print the current version."),
    verbose: bool = typer.Option(False, "--verbose", help="Output additional logs."),
) -> ParsedInvocation:
    invocation: ParsedInvocation = ctx.obj
    invocation.version = version
    invocation.verbose = verbose
    return invocation


def _record_command(ctx: typer.Context) -> ParsedInvocation:
    invocation: ParsedInvocation = ctx.obj
    invocation.command = ctx.info_name
    invocation.args = tuple(ctx.args)
    return invocation


class ArgumentGrammar:
    """Global flags plus the name → handler dispatch table."""

    def __init__(self, name: str = EXECUTABLE_NAME, description: str = DESCRIPTION):
        self.name = name
        self._app = typer.Typer(
            name=name,
            help=description,
            add_completion=False,
            rich_markup_mode=None,
        )
        self._app.callback(invoke_without_command=True)(_record_flags)
        self._commands: dict[str, SubcommandDescriptor] = {}
        self._click_command: Optional[click.Command] = None

    @property
    def commands(self) -> Mapping[str, SubcommandDescriptor]:
        return MappingProxyType(self._commands)

    def add_command(self, descriptor: SubcommandDescriptor) -> None:
        """Register *descriptor* under its name.

        Raises:
            DuplicateCommandError: If the name is already registered
        """
        if descriptor.name in self._commands:
            raise DuplicateCommandError(descriptor.name)
        self._commands[descriptor.name] = descriptor
        self._app.command(
            name=descriptor.name,
            help=descriptor.help,
            context_settings=PASSTHROUGH_SETTINGS,
        )(_record_command)
        self._click_command = None

    @property
    def click_command(self) -> click.Command:
        if self._click_command is None:
            self._click_command = typer.main.get_command(self._app)
        return self._click_command

    @property
    def usage(self) -> str:
        command = self.click_command
        with command.make_context(self.name, [], resilient_parsing=True) as ctx:
            return command.get_help(ctx)

    def parse(self, args: Sequence[str]) -> ParsedInvocation:
        """Parse *args* against the grammar.

        Raises:
            ArgumentsError: For malformed flags or unknown commands
        """
        invocation = ParsedInvocation()
        try:
            outcome = self.click_command.main(
                args=list(args),
                prog_name=self.name,
                standalone_mode=False,
                obj=invocation,
            )
        except CLICK_USAGE_ERRORS as e:
            raise ArgumentsError(e.format_message(), usage=click_usage(e, self.usage)) from e
        # An eager option such as --help printed its output and exited,
        # in which case click hands back the exit code instead
        if outcome is not invocation:
            invocation.help_shown = True
        return invocation
