# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_main.py

"""End-to-end checks through the process entry point."""

import pytest
import yaml

from mason_cli import __version__
from mason_cli.cli.main import main
from mason_cli.system.exit_codes import ExitCode
from mason_cli.system.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def offline_config(tmp_path, monkeypatch):
    """Point config discovery at a file that disables the update check."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("MASON_CONFIG_HOME", str(tmp_path))
    with (tmp_path / "mason.yml").open("w") as f:
        yaml.safe_dump({"check_for_updates": False}, f)
    yield tmp_path
    setup_logging()


def test_version(capsys):
    """Test that --version prints the installed version."""
    assert main(["--version"]) == ExitCode.SUCCESS
    assert capsys.readouterr().out.strip() == __version__


def test_unknown_command(capsys):
    """Test that an unknown command exits with the usage code."""
    assert main(["nope"]) == ExitCode.USAGE
    err = capsys.readouterr().err
    assert "nope" in err
    assert "Usage: mason" in err


def test_missing_plugin(capsys, monkeypatch):
    """Test when the command's provider is not installed."""
    from mason_cli.cli.commands import plugins

    monkeypatch.setattr(plugins, "find_provider", lambda name: None)

    assert main(["make", "greeting"]) == ExitCode.USAGE
    assert "'make' command is not installed" in capsys.readouterr().err


def test_update_rejects_arguments(capsys):
    """Test that update shows its own usage."""
    assert main(["update", "now"]) == ExitCode.USAGE
    assert "Usage: mason update" in capsys.readouterr().err


def test_invalid_config(offline_config, capsys):
    """Test that an invalid config file exits with the usage code."""
    with (offline_config / "mason.yml").open("w") as f:
        yaml.safe_dump({"update_timeout": "soon"}, f)

    assert main(["--version"]) == ExitCode.USAGE
    assert "Invalid mason.yml" in capsys.readouterr().err


def test_file_logging(offline_config):
    """Test that local_log enables the diagnostic log file."""
    log_dir = offline_config / "logs"
    with (offline_config / "mason.yml").open("w") as f:
        yaml.safe_dump({"check_for_updates": False, "local_log": str(log_dir)}, f)

    assert main(["--verbose", "--version"]) == ExitCode.SUCCESS
    assert (log_dir / "mason.log").exists()
