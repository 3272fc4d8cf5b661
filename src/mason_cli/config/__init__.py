# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/config/__init__.py

"""User configuration for the mason CLI."""

from .manager import UserConfig, load_user_config

__all__ = ['UserConfig', 'load_user_config']
