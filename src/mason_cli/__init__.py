# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/__init__.py

"""mason - lay the foundation! Command-line dispatch core."""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "mason-cli"
EXECUTABLE_NAME = "mason"
DESCRIPTION = "mason • lay the foundation!"

try:
    __version__ = version(PACKAGE_NAME)
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0"

__all__ = ["PACKAGE_NAME", "EXECUTABLE_NAME", "DESCRIPTION", "__version__"]
