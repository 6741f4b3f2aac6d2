from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

import httpx

from .base import BaseRemoteFileManager


@dataclass
class HTTPFetchSettings:
    url: str
    timeout_seconds: int
    user_agent: str


class HTTPRemoteFileManager(BaseRemoteFileManager):
    def __init__(self, settings: HTTPFetchSettings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    async def fetch_remote_file(self, on_complete: Callable[[bytes], None]) -> None:
        headers = {"User-Agent": self._settings.user_agent, "Accept": "application/json"}

        async with httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            try:
                response = await client.get(self._settings.url, headers=headers)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                self._logger.error(
                    "Configuration fetch failed with status %s", exc.response.status_code
                )
                return
            except httpx.HTTPError as exc:
                self._logger.error("Configuration fetch failed: %s", exc)
                return

        self._logger.debug("Fetched %s bytes from %s", len(response.content), self._settings.url)
        on_complete(response.content)
