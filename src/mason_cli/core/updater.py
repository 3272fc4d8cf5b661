# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/core/updater.py

"""
Version lookup against the package index and the post-command update notice.

- PyPIUpdater: reads the latest release from the PyPI JSON API and
  performs the self-update through pip
- UpdateNotifier: compares the running version with the latest release
  and prints a notice when they differ; never raises
"""

import asyncio
import sys
import traceback
from typing import Optional

import aiohttp
from rich.text import Text

from mason_cli import EXECUTABLE_NAME, PACKAGE_NAME
from mason_cli.config.manager import DEFAULT_INDEX_URL
from mason_cli.core.protocols import VersionLookup
from mason_cli.system.exceptions import ProcessError, VersionLookupError
from mason_cli.system.logger import Logger

CHANGELOG_URL = "https://github.com/felangel/mason/releases/tag/mason_cli-v{version}"


class PyPIUpdater:
    """VersionLookup backed by the PyPI JSON API."""

    def __init__(
        self,
        index_url: str = DEFAULT_INDEX_URL,
        timeout: float = 5.0,
        python: Optional[str] = None,
    ):
        self.index_url = index_url.rstrip("/")
        self.timeout = timeout
        self.python = python or sys.executable

    async def get_latest_version(self, package_name: str) -> str:
        """Return the version PyPI reports as latest for *package_name*.

        Raises:
            VersionLookupError: On network failures or a malformed payload
        """
        url = f"{self.index_url}/pypi/{package_name}/json"
        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout)) as session:
                async with session.get(url) as response:
                    response.raise_for_status()
                    payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise VersionLookupError(f"Unable to fetch the latest version of {package_name}: {e}") from e

        try:
            latest = payload["info"]["version"]
        except (KeyError, TypeError) as e:
            raise VersionLookupError(f"Malformed package metadata from {url}") from e
        if not isinstance(latest, str) or not latest:
            raise VersionLookupError(f"Malformed package metadata from {url}")
        return latest

    async def update(self, package_name: str, version: str) -> None:
        """Install *version* of *package_name* into the running interpreter.

        Raises:
            ProcessError: If pip cannot be started or exits non-zero
        """
        command = [self.python, "-m", "pip", "install", "--upgrade", f"{package_name}=={version}"]
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ProcessError(f"Unable to run {command[0]}: {e}", command=command) from e

        try:
            _, stderr = await process.communicate()
        except BaseException:
            # Ctrl-C or task cancellation; pip is not left running
            process.kill()
            raise
        if process.returncode != 0:
            detail = stderr.decode(errors="replace").strip()
            raise ProcessError(
                f"pip exited with code {process.returncode}: {detail}",
                command=command,
                returncode=process.returncode,
            )


class UpdateNotifier:
    """Tells the user when a newer release than the running one exists."""

    def __init__(
        self,
        logger: Logger,
        lookup: VersionLookup,
        package_name: str = PACKAGE_NAME,
        executable_name: str = EXECUTABLE_NAME,
    ):
        self.logger = logger
        self.lookup = lookup
        self.package_name = package_name
        self.executable_name = executable_name

    async def check_and_notify(self, current_version: str) -> None:
        self.logger.detail("\n[updater] checking for updates...")
        try:
            latest_version = await self.lookup.get_latest_version(self.package_name)
            self.logger.detail(f"[updater] latest version is {latest_version}.")

            if current_version == latest_version:
                self.logger.detail("[updater] no updates available.")
                return

            self.logger.detail("[updater] update available.")
            self.logger.info("")
            self.logger.info(self.render_notice(current_version, latest_version))
        except Exception as error:
            self.logger.detail(f"[updater] update check error.\n{error}\n{traceback.format_exc()}")
        finally:
            self.logger.detail("[updater] update check complete.")

    def render_notice(self, current_version: str, latest_version: str) -> Text:
        changelog = CHANGELOG_URL.format(version=latest_version)
        return Text.assemble(
            ("Update available!", "bright_yellow"),
            " ",
            (current_version, "bright_cyan"),
            " → ",
            (latest_version, "bright_cyan"),
            "\n",
            ("Changelog:", "bright_yellow"),
            " ",
            (changelog, f"bright_cyan underline link {changelog}"),
            "\nRun ",
            (f"{self.executable_name} update", "cyan"),
            " to update",
        )
