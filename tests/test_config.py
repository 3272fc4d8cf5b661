# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_config.py

from pathlib import Path

import pytest
import yaml

from mason_cli.config.manager import (
    DEFAULT_HOSTED_URL,
    USER_CFG,
    UserConfig,
    _load_merged_config_data,
    load_user_config,
)
from mason_cli.system.exceptions import ConfigError


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Isolate config discovery to a temporary MASON_CONFIG_HOME."""
    home = tmp_path / "home"
    home.mkdir()
    override = tmp_path / "override"
    override.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("MASON_CONFIG_HOME", str(override))
    return override


def write_config(directory: Path, data) -> Path:
    path = directory / USER_CFG
    with path.open("w") as f:
        yaml.safe_dump(data, f)
    return path


def test_defaults_without_config(config_home):
    """Test the defaults when no config file exists."""
    config = load_user_config()
    assert config == UserConfig()
    assert config.check_for_updates is True
    assert config.hosted_url == DEFAULT_HOSTED_URL
    assert config.local_log is None


def test_override_values(config_home, tmp_path):
    """Test that a config file overrides the defaults."""
    write_config(config_home, {
        "check_for_updates": False,
        "local_log": str(tmp_path / "logs"),
        "update_timeout": 1.5,
    })

    config = load_user_config()
    assert config.check_for_updates is False
    assert config.local_log == tmp_path / "logs"
    assert config.update_timeout == 1.5


def test_later_files_take_priority(tmp_path):
    """Test that later search paths win key by key."""
    low = tmp_path / "low"
    high = tmp_path / "high"
    low.mkdir()
    high.mkdir()
    write_config(low, {"index_url": "https://low.example", "check_for_updates": False})
    write_config(high, {"index_url": "https://high.example"})

    data = _load_merged_config_data((low / USER_CFG, high / USER_CFG))
    assert data == {"index_url": "https://high.example", "check_for_updates": False}


def test_unreadable_file_is_skipped(config_home):
    """Test when a config file is not valid YAML."""
    (config_home / USER_CFG).write_text("check_for_updates: [unclosed\n")

    assert load_user_config() == UserConfig()


def test_non_mapping_file_is_skipped(config_home):
    """Test when a config file is not a mapping."""
    (config_home / USER_CFG).write_text("- just\n- a list\n")

    assert load_user_config() == UserConfig()


def test_invalid_values_raise_config_error(config_home):
    """Test that invalid values name the config file."""
    write_config(config_home, {"update_timeout": "soon"})

    with pytest.raises(ConfigError) as excinfo:
        load_user_config()
    assert USER_CFG in excinfo.value.message
