# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/config/manager.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Final

import yaml
from loguru import logger
from pydantic import BaseModel, ValidationError

from mason_cli.system.exceptions import ConfigError


# ---- Constants ----

USER_CFG: Final = "mason.yml"
DEFAULT_HOSTED_URL: Final = "https://registry.brickhub.dev"
DEFAULT_INDEX_URL: Final = "https://pypi.org"


def _get_user_config_search_paths() -> tuple[Path, ...]:
    """Get config file search paths (ordered by priority: lowest to highest).

    Evaluated on every call so environment overrides set by tests apply.
    """
    return (
        Path("/etc/mason") / USER_CFG,  # System defaults
        Path.home() / ".config" / "mason" / USER_CFG,  # User config
        Path(os.getenv("XDG_CONFIG_HOME", "")) / "mason" / USER_CFG,  # XDG override
        Path(os.getenv("MASON_CONFIG_HOME", "")) / USER_CFG,  # Explicit override (highest priority)
    )


def _load_merged_config_data(candidates: tuple[Path, ...]) -> dict:
    """Load and merge config data from candidate paths.

    Files that cannot be read or parsed are skipped with a warning.
    Later candidates override earlier ones key by key.
    """
    merged_data = {}
    found_configs = []

    for candidate in candidates:
        # Unset environment variables collapse to a path relative to cwd
        if candidate in (Path(USER_CFG), Path("mason") / USER_CFG):
            continue
        if not candidate.is_file():
            continue
        try:
            with candidate.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError("top level must be a mapping")
            merged_data.update(data)
            found_configs.append(str(candidate))
            logger.debug(f"Loaded config from {candidate}")
        except Exception as e:
            logger.warning(f"Failed to load config from {candidate}: {e}")

    if found_configs:
        logger.debug(f"Merged config from: {', '.join(found_configs)}")
    else:
        logger.debug(f"No {USER_CFG} found, using defaults")
    return merged_data


class UserConfig(BaseModel):
    """Per-user settings for the mason CLI."""
    local_log: Optional[Path] = None
    check_for_updates: bool = True
    hosted_url: str = DEFAULT_HOSTED_URL
    index_url: str = DEFAULT_INDEX_URL
    update_timeout: float = 5.0


def load_user_config() -> UserConfig:
    """Load and validate the merged user configuration.

    Returns:
        UserConfig built from all mason.yml files found, or defaults

    Raises:
        ConfigError: If the merged settings fail validation
    """
    data = _load_merged_config_data(_get_user_config_search_paths())
    try:
        return UserConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {USER_CFG}: {e}") from e
