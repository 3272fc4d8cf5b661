# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/cli/commands/completion.py

"""Shell completion script generation for the top-level grammar."""

import os
from pathlib import Path
from typing import Optional, Sequence

from click.shell_completion import get_completion_class

from mason_cli.cli.grammar import ArgumentGrammar
from mason_cli.system.exceptions import UsageError
from mason_cli.system.logger import Logger
from mason_cli.system.exit_codes import ExitCode

COMPLETION_COMMAND = "completion"
SUPPORTED_SHELLS = ("bash", "zsh", "fish")
USAGE = f"Usage: mason {COMPLETION_COMMAND} [{'|'.join(SUPPORTED_SHELLS)}]"


def detect_shell() -> Optional[str]:
    """Return the basename of $SHELL, if set."""
    shell = os.environ.get("SHELL")
    return Path(shell).name if shell else None


class CompletionCommand:
    """Prints the completion script for a shell to stdout."""

    def __init__(self, grammar: ArgumentGrammar, logger: Logger):
        self.grammar = grammar
        self.logger = logger

    @property
    def complete_var(self) -> str:
        return f"_{self.grammar.name}_COMPLETE".replace("-", "_").upper()

    def run(self, args: Sequence[str]) -> int:
        if len(args) > 1:
            raise UsageError(f"Expected at most one shell, got {len(args)} arguments", usage=USAGE)

        shell = args[0] if args else detect_shell()
        completion_class = get_completion_class(shell) if shell else None
        if completion_class is None:
            raise UsageError(f"Unsupported shell: {shell or 'unknown'}", usage=USAGE)

        completion = completion_class(
            self.grammar.click_command, {}, self.grammar.name, self.complete_var
        )
        self.logger.write(completion.source())
        return ExitCode.SUCCESS
