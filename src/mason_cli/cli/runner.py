# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/cli/runner.py

"""
The command runner: the single error boundary of the mason CLI.

Every invocation goes through CommandRunner.run(), which parses the
arguments, dispatches to the matched subcommand, runs the post-command
update check and turns whatever happened into one exit code. The remote
registry client is closed on every path out of run().
"""

import inspect
from typing import Iterable, Optional

from mason_cli import __version__
from mason_cli.cli.commands import default_commands
from mason_cli.cli.commands.completion import COMPLETION_COMMAND, CompletionCommand
from mason_cli.cli.commands.update import UPDATE_COMMAND
from mason_cli.cli.grammar import ArgumentGrammar, ParsedInvocation, SubcommandDescriptor
from mason_cli.config.manager import UserConfig
from mason_cli.core.api import MasonApi
from mason_cli.core.context import CommandContext
from mason_cli.core.protocols import ApiClient, VersionLookup
from mason_cli.core.updater import PyPIUpdater, UpdateNotifier
from mason_cli.system.exit_codes import ExitCode
from mason_cli.system.failures import CLICK_EXIT_REQUESTS, Failure, classify
from mason_cli.system.logger import Level, Logger


class CommandRunner:
    """Parses, dispatches and maps outcomes to exit codes."""

    def __init__(
        self,
        logger: Optional[Logger] = None,
        updater: Optional[VersionLookup] = None,
        api: Optional[ApiClient] = None,
        config: Optional[UserConfig] = None,
        commands: Optional[Iterable[SubcommandDescriptor]] = None,
        version: str = __version__,
    ):
        self.config = config or UserConfig()
        self.logger = logger or Logger()
        self.updater = updater or PyPIUpdater(
            index_url=self.config.index_url, timeout=self.config.update_timeout
        )
        self.api = api or MasonApi(hosted_url=self.config.hosted_url)
        self.version = version
        self.context = CommandContext(
            logger=self.logger, api=self.api, updater=self.updater, config=self.config
        )
        self.notifier = UpdateNotifier(self.logger, self.updater)

        self.grammar = ArgumentGrammar()
        if commands is None:
            commands = default_commands(self.context, version)
        for descriptor in commands:
            self.grammar.add_command(descriptor)
        self.grammar.add_command(
            SubcommandDescriptor(
                COMPLETION_COMMAND,
                "Print the shell completion script.",
                CompletionCommand(self.grammar, self.logger),
            )
        )

    async def run(self, args: Iterable[str]) -> int:
        try:
            return int(await self.run_command(self.grammar.parse(list(args))))
        except Exception as error:
            failure = classify(error, usage=self.grammar.usage)
            self._report(failure)
            return int(failure.exit_code)
        finally:
            await self.api.close()

    async def run_command(self, invocation: ParsedInvocation) -> int:
        if invocation.command == COMPLETION_COMMAND:
            await self._dispatch(invocation)
            return ExitCode.SUCCESS

        if invocation.verbose:
            self.logger.level = Level.VERBOSE

        if invocation.version:
            self.logger.info(self.version)
            exit_code = ExitCode.SUCCESS
        elif invocation.command is not None:
            exit_code = await self._dispatch(invocation)
        else:
            if not invocation.help_shown:
                self.logger.info(self.grammar.usage)
            exit_code = ExitCode.SUCCESS

        if invocation.command != UPDATE_COMMAND and self.config.check_for_updates:
            await self.notifier.check_and_notify(self.version)
        return exit_code

    async def _dispatch(self, invocation: ParsedInvocation) -> int:
        handler = self.grammar.commands[invocation.command].handler
        self.logger.detail(f"Running '{invocation.command}' with {list(invocation.args)}")
        try:
            result = handler.run(invocation.args)
            if inspect.isawaitable(result):
                result = await result
        except SystemExit as e:
            result = self._exit_status(e.code)
        except CLICK_EXIT_REQUESTS as e:
            result = e.exit_code
        return ExitCode.SUCCESS if result is None else int(result)

    def _exit_status(self, code: object) -> Optional[int]:
        if code is None or isinstance(code, int):
            return code
        # sys.exit() was given a message instead of a status
        self.logger.err(str(code))
        return ExitCode.SOFTWARE

    def _report(self, failure: Failure) -> None:
        self.logger.err(failure.message)
        if failure.usage:
            self.logger.write("", err=True)
            self.logger.write(failure.usage, err=True)
