# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/cli/__init__.py

"""Command Line Interface package for mason."""

from .main import cli, main

__all__ = ['cli', 'main']
