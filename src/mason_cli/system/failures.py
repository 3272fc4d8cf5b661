# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/system/failures.py

"""Classification of caught exceptions into tagged Failure records."""

import subprocess
from dataclasses import dataclass
from typing import Optional

import click
import typer

from mason_cli.system.exceptions import MasonError, UsageError
from mason_cli.system.exit_codes import ExitCode, FailureKind, exit_code_for

# Recent typer releases run on their own copy of click, whose exceptions do
# not derive from the installed click's. Both families are recognized.
CLICK_USAGE_ERRORS = (
    click.UsageError,
    next(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError"),
)
CLICK_EXIT_REQUESTS = (click.exceptions.Exit, typer.Exit)


@dataclass(frozen=True)
class Failure:
    """A failure as seen by the CLI boundary."""
    kind: FailureKind
    message: str
    usage: Optional[str] = None

    @property
    def exit_code(self) -> ExitCode:
        return exit_code_for(self.kind)


def click_usage(error: BaseException, fallback: str = "") -> str:
    """Help text of the command that rejected its arguments, else *fallback*."""
    ctx = getattr(error, "ctx", None)
    if ctx is None:
        return fallback
    return ctx.get_help()


def classify(error: BaseException, usage: str = "") -> Failure:
    """Tag a caught exception with its place in the failure taxonomy.

    Args:
        error: The exception that escaped a subcommand or the parser
        usage: Top-level usage text, shown when a click usage error
            carries no context of its own

    Returns:
        Failure record; unrecognized exceptions are UNCLASSIFIED
    """
    if isinstance(error, CLICK_USAGE_ERRORS):
        return Failure(
            FailureKind.USAGE_MALFORMED,
            error.format_message(),
            usage=click_usage(error, usage) or None,
        )

    if isinstance(error, UsageError):
        return Failure(error.kind, error.message, usage=error.usage or None)

    if isinstance(error, MasonError):
        return Failure(error.kind, error.message)

    if isinstance(error, subprocess.SubprocessError):
        return Failure(FailureKind.EXTERNAL_PROCESS, str(error))

    return Failure(FailureKind.UNCLASSIFIED, str(error) or type(error).__name__)
