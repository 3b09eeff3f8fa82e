# site_crawler/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per call with a per-request timeout.

Failures (network errors, timeouts, non-2xx statuses) come back as
:class:`~site_crawler.crawler.models.Failed` values; nothing is retried.
"""
from __future__ import annotations

import asyncio
from typing import Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from site_crawler.crawler.models import Failed, FetchOutcome, Page
from site_crawler.logger import get_logger

__all__ = ("PageFetcher", "Fetcher")


class PageFetcher(Protocol):
    """Anything the scheduler can ask for a page."""

    async def fetch(self, url: str) -> FetchOutcome: ...


class Fetcher:
    """Fetches pages through a shared aiohttp session."""

    def __init__(self, session: ClientSession, timeout: float = 10.0) -> None:
        self.session = session
        self._timeout = ClientTimeout(total=timeout)
        self.logger = get_logger("fetcher")

    async def fetch(self, url: str) -> FetchOutcome:
        """
        GET *url* and return Page on 2xx, Failed otherwise.

        Never raises except for cancellation.
        """
        try:
            async with self.session.get(url, timeout=self._timeout, raise_for_status=False) as resp:
                if not 200 <= resp.status < 300:
                    return self._failed(url, f"HTTP {resp.status}")
                body = await resp.text(errors="replace")
                return Page(url, body)
        except asyncio.TimeoutError:
            return self._failed(url, "timeout")
        except (ClientError, UnicodeDecodeError, LookupError, ValueError) as exc:
            # LookupError: unknown charset in Content-Type; ValueError: malformed URL
            return self._failed(url, f"{type(exc).__name__}: {exc}")

    def _failed(self, url: str, reason: str) -> Failed:
        self.logger.warning("Failed %s: %s", url, reason)
        return Failed(url, reason)
