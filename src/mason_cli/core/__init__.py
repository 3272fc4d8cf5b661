# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/core/__init__.py

"""Core collaborators: remote API handle, version lookup and update notices."""
