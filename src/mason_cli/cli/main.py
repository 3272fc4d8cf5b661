# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/cli/main.py

"""Process entry point: logging, configuration, then the command runner."""

import asyncio
import sys
from typing import Optional, Sequence

from mason_cli.cli.runner import CommandRunner
from mason_cli.config.manager import load_user_config
from mason_cli.system.exceptions import ConfigError
from mason_cli.system.failures import classify
from mason_cli.system.logger import Logger
from mason_cli.system.logging_setup import add_file_logging, setup_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the mason CLI and return the process exit code.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]
    """
    setup_logging()
    try:
        config = load_user_config()
    except ConfigError as e:
        # The runner does not exist yet, so report as it would
        failure = classify(e)
        Logger().err(failure.message)
        return int(failure.exit_code)

    if config.local_log:
        add_file_logging(config.local_log)

    runner = CommandRunner(config=config)
    return asyncio.run(runner.run(sys.argv[1:] if argv is None else argv))


def cli() -> None:  # pragma: no cover - console script
    """Entry point for the mason console script."""
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    cli()
