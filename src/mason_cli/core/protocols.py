# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/core/protocols.py

"""
Protocol definitions for the collaborators the dispatch core talks to.

These are structural interfaces: subcommands, updaters and API clients
supplied by plugins or tests satisfy them without inheriting from anything.
"""

from typing import Any, Awaitable, Optional, Protocol, Sequence, Union, runtime_checkable

CommandResult = Optional[int]


@runtime_checkable
class Command(Protocol):
    """A subcommand handler.

    ``run`` receives the residual arguments and returns an exit code,
    None for success, or an awaitable of either. Failures are raised.
    """

    def run(self, args: Sequence[str]) -> Union[CommandResult, Awaitable[CommandResult]]:
        ...


class VersionLookup(Protocol):
    """Service reporting the latest published version of a package."""

    async def get_latest_version(self, package_name: str) -> str:
        ...

    async def update(self, package_name: str, version: str) -> None:
        ...


class ApiClient(Protocol):
    """Long-lived handle to the remote brick registry."""

    @property
    def closed(self) -> bool:
        ...

    async def get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        ...

    async def close(self) -> None:
        ...
