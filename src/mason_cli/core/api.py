# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mason_cli/core/api.py

"""
Remote brick registry client.

The aiohttp session is created on first request so it always belongs to
the running event loop. The command runner owns the client and closes it
once per invocation.
"""

from typing import Any, Optional

import aiohttp
from loguru import logger

from mason_cli.config.manager import DEFAULT_HOSTED_URL
from mason_cli.system.exceptions import ApiError


class MasonApi:
    """Handle to the brick registry at *hosted_url*."""

    def __init__(self, hosted_url: str = DEFAULT_HOSTED_URL, timeout: float = 30.0):
        self.hosted_url = hosted_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _get_session(self) -> aiohttp.ClientSession:
        if self._closed:
            raise ApiError("The registry client has already been closed")
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        """GET ``<hosted_url>/<path>`` and decode the JSON body.

        Raises:
            ApiError: On connection failures, non-2xx statuses or bad JSON
        """
        url = f"{self.hosted_url}/{path.lstrip('/')}"
        session = self._get_session()
        logger.debug(f"GET {url} params={params}")
        try:
            async with session.get(url, params=params) as response:
                if response.status >= 400:
                    raise ApiError(
                        f"Request to {url} failed with status {response.status}",
                        status=response.status,
                    )
                return await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise ApiError(f"Unable to reach {self.hosted_url}: {e}") from e
        except ValueError as e:
            raise ApiError(f"Malformed response from {url}: {e}") from e

    async def close(self) -> None:
        """Release the underlying session. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._session is not None:
            await self._session.close()
            self._session = None
