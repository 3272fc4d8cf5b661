# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/cli/commands/update.py

"""Self-update command."""

from typing import Sequence

from mason_cli import PACKAGE_NAME, __version__
from mason_cli.core.context import CommandContext
from mason_cli.system.exceptions import UsageError
from mason_cli.system.exit_codes import ExitCode

UPDATE_COMMAND = "update"
USAGE = f"Usage: mason {UPDATE_COMMAND}"


class UpdateCommand:
    """Installs the latest published mason-cli over the running one."""

    def __init__(self, context: CommandContext, current_version: str = __version__):
        self.context = context
        self.current_version = current_version

    async def run(self, args: Sequence[str]) -> int:
        if args:
            raise UsageError(f"'{UPDATE_COMMAND}' does not take any arguments", usage=USAGE)

        logger = self.context.logger
        logger.info("Checking for updates")
        latest_version = await self.context.updater.get_latest_version(PACKAGE_NAME)

        if latest_version == self.current_version:
            logger.info(f"mason is already at the latest version ({latest_version}).")
            return ExitCode.SUCCESS

        logger.info(f"Updating to {latest_version}")
        await self.context.updater.update(PACKAGE_NAME, latest_version)
        logger.success(f"Updated to {latest_version}")
        return ExitCode.SUCCESS
