# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/system/exceptions.py

"""
mason-specific exception classes.

Each MasonError subclass carries the taxonomy tag the CLI boundary uses to
pick an exit code, so subcommands signal failures by raising and never by
exiting the process themselves.
"""

from typing import Optional, Sequence

from mason_cli.system.exit_codes import FailureKind


class MasonError(Exception):
    """Base exception for recognized, named mason failures."""

    kind = FailureKind.DOMAIN

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigError(MasonError):
    """Raised when the user configuration cannot be validated."""
    pass


class UsageError(MasonError):
    """Raised by a subcommand that parsed its arguments but rejects them."""

    kind = FailureKind.USAGE_SEMANTIC

    def __init__(self, message: str, usage: str = ""):
        self.usage = usage
        super().__init__(message)


class ArgumentsError(UsageError):
    """Raised when the arguments do not match the top-level grammar."""

    kind = FailureKind.USAGE_MALFORMED


# === EXTERNAL PROCESS AND SERVICE ERRORS ===

class ProcessError(MasonError):
    """An external process could not be started or exited unsuccessfully."""

    kind = FailureKind.EXTERNAL_PROCESS

    def __init__(self, message: str, command: Optional[Sequence[str]] = None, returncode: Optional[int] = None):
        self.command = list(command) if command else []
        self.returncode = returncode
        super().__init__(message)


class ApiError(MasonError):
    """The remote brick registry could not be reached or answered badly."""

    kind = FailureKind.EXTERNAL_PROCESS

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class VersionLookupError(MasonError):
    """The package index did not report a usable latest version."""

    kind = FailureKind.EXTERNAL_PROCESS


# === PROGRAMMING ERRORS ===

class DuplicateCommandError(ValueError):
    """Raised at startup when two subcommands share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A command named '{name}' is already registered")
