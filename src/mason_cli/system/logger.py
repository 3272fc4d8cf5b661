# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/system/logger.py

"""
User-facing output with a mutable verbosity threshold.

Plain messages are printed with rich markup disabled so text such as
``[updater]`` is never mistaken for a style tag. Styled output is passed
in as ``rich.text.Text``.
"""

from enum import IntEnum
from typing import Optional, Union

from loguru import logger as diagnostics
from rich.console import Console
from rich.text import Text

Message = Union[str, Text]


class Level(IntEnum):
    VERBOSE = 10
    INFO = 20
    ERROR = 40


class Logger:
    """Leveled writer for stdout and stderr."""

    def __init__(
        self,
        level: Level = Level.INFO,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.level = level
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def write(self, message: Message, *, err: bool = False, style: Optional[str] = None) -> None:
        """Print unconditionally, bypassing the level threshold."""
        target = self.err_console if err else self.console
        target.print(
            message,
            style=style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def detail(self, message: Message) -> None:
        diagnostics.debug(str(message))
        if self.level <= Level.VERBOSE:
            self.write(message, style="dim")

    def info(self, message: Message) -> None:
        if self.level <= Level.INFO:
            self.write(message)

    def success(self, message: Message) -> None:
        if self.level <= Level.INFO:
            self.write(message, style="green")

    def err(self, message: Message) -> None:
        if self.level <= Level.ERROR:
            self.write(message, err=True, style="red")
