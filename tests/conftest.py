# File: tests/conftest.py
import asyncio
import json
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Dict, Iterable, List

import pytest
from aiohttp import web

from site_crawler.config import CrawlLimits, CrawlerConfig
from site_crawler.crawler.models import Failed, FetchOutcome, Page


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


class FakeFetcher:
    """
    In-memory fetcher: serves *pages* by URL, counts calls and the number
    of fetches in flight at the same time.
    """

    def __init__(
        self,
        pages: Dict[str, str],
        *,
        delay: float = 0.01,
        delays: Dict[str, float] | None = None,
        timeouts: Iterable[str] = (),
    ) -> None:
        self.pages = pages
        self.delay = delay
        self.delays = delays or {}
        self.timeouts = set(timeouts)
        self.calls: List[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, url: str) -> FetchOutcome:
        self.calls.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, self.delay))
            if url in self.timeouts:
                return Failed(url, "timeout")
            if url in self.pages:
                return Page(url, self.pages[url])
            return Failed(url, "HTTP 404")
        finally:
            self.in_flight -= 1


def links_page(*hrefs: str) -> str:
    """HTML body with one anchor per href."""
    anchors = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html><body>{anchors}</body></html>"


@pytest.fixture()
def basic_limits() -> CrawlLimits:
    return CrawlLimits(max_depth=2, concurrency_limit=4, max_pages=50)


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """
    Return a basic valid CrawlerConfig for runner and CLI tests.
    """
    return CrawlerConfig(
        seed_url="http://example.com",
        limits=CrawlLimits(max_depth=1, concurrency_limit=2, max_pages=10),
        timeout=2.0,
        user_agent="TestAgent/1.0",
    )


@pytest.fixture()
def config_file(tmp_path) -> Path:
    """JSON config file in tmp_path."""
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "seed_url": "https://example.com",
                "limits": {"max_depth": 1, "concurrency_limit": 2, "max_pages": 10},
                "timeout": 1.0,
                "user_agent": "Agent/1.0",
            }
        ),
        encoding="utf-8",
    )
    return path


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()
