# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/system/logging_setup.py

import sys
from pathlib import Path

from loguru import logger

LOG_FILE_NAME = "mason.log"


def setup_logging() -> None:
    """Setup loguru logging for the entire application.

    Console output is WARNING+ only so diagnostics never mix with
    command output. See add_file_logging() for the DEBUG file sink.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="WARNING",
        format="<level>{level}</level>: {message}",
        colorize=True
    )


def add_file_logging(local_log: Path) -> None:
    """Add a DEBUG+ file sink under *local_log*.

    Args:
        local_log: Directory receiving mason.log, created if missing
    """
    try:
        log_dir = Path(local_log).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="30 days",
            compression="gz"
        )
        logger.debug(f"File logging enabled: {log_file}")

    except Exception as e:
        # A broken log directory must not stop the command from running
        logger.warning(f"Failed to setup file logging: {e}")
