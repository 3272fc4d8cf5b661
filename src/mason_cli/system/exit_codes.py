# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/system/exit_codes.py

"""
Process exit codes and the failure taxonomy they are selected from.

Exit codes follow the BSD ``sysexits`` values:

- SUCCESS (0): the command completed
- USAGE (64): malformed arguments, unknown commands, or a recognized
  domain failure caused by user input
- UNAVAILABLE (69): an external process or service could not be used
- SOFTWARE (70): anything else
"""

from enum import Enum, IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    USAGE = 64
    UNAVAILABLE = 69
    SOFTWARE = 70


class FailureKind(Enum):
    """Taxonomy tag attached to every failure that reaches the CLI boundary."""

    USAGE_MALFORMED = "usage-malformed"
    USAGE_SEMANTIC = "usage-semantic"
    DOMAIN = "domain"
    EXTERNAL_PROCESS = "external-process"
    UNCLASSIFIED = "unclassified"


_EXIT_CODES: dict[FailureKind, ExitCode] = {
    FailureKind.USAGE_MALFORMED: ExitCode.USAGE,
    FailureKind.USAGE_SEMANTIC: ExitCode.USAGE,
    FailureKind.DOMAIN: ExitCode.USAGE,
    FailureKind.EXTERNAL_PROCESS: ExitCode.UNAVAILABLE,
    FailureKind.UNCLASSIFIED: ExitCode.SOFTWARE,
}


def exit_code_for(kind: object) -> ExitCode:
    """Map a taxonomy tag to its exit code.

    Total over any input: unknown tags map to ``ExitCode.SOFTWARE``.
    """
    if not isinstance(kind, FailureKind):
        return ExitCode.SOFTWARE
    return _EXIT_CODES.get(kind, ExitCode.SOFTWARE)
