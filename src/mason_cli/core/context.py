# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/core/context.py

from dataclasses import dataclass

from mason_cli.config.manager import UserConfig
from mason_cli.core.protocols import ApiClient, VersionLookup
from mason_cli.system.logger import Logger


@dataclass(frozen=True)
class CommandContext:
    """Per-invocation state handed to every subcommand factory.

    The runner owns ``api``; commands may use it but never close it.
    """
    logger: Logger
    api: ApiClient
    updater: VersionLookup
    config: UserConfig
