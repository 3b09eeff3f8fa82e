# === FILE: site_crawler/crawler/crawler.py ===
"""Level-synchronous breadth-first crawler.

The frontier of each level is split into batches of at most
``concurrency_limit`` URLs. A batch is fetched concurrently and fully awaited
before its links are merged into the visited set, so the visited set is only
ever touched by one coroutine at a time.
"""
from __future__ import annotations

import asyncio
import time
from typing import Dict, Iterator, List, Optional, Sequence

from aiohttp import ClientSession, ClientTimeout

from site_crawler.config import CrawlLimits
from site_crawler.crawler.fetcher import Fetcher, PageFetcher
from site_crawler.crawler.link_extractor import extract_links
from site_crawler.crawler.models import CrawlResult, Failed, Page
from site_crawler.logger import get_logger
from site_crawler.utils import same_origin, validate_seed

__all__ = ("LevelCrawler", "crawl", "DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT")

DEFAULT_TIMEOUT: float = 10.0
DEFAULT_USER_AGENT: str = "SiteCrawler/1.0"


def _batches(frontier: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    for start in range(0, len(frontier), size):
        yield frontier[start:start + size]


class LevelCrawler:
    """Bounded BFS crawler restricted to the seed's host.

    Use as an async context manager; without an explicit *fetcher* it opens
    its own aiohttp session for the duration of the block.
    """

    def __init__(
        self,
        seed_url: str,
        limits: CrawlLimits,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        fetcher: Optional[PageFetcher] = None,
    ) -> None:
        self.seed_url = validate_seed(seed_url)
        self.limits = limits
        self.timeout = timeout
        self.user_agent = user_agent
        self.fetcher = fetcher
        self.session: Optional[ClientSession] = None
        self.logger = get_logger("crawler")

    async def __aenter__(self) -> LevelCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.timeout),
                headers={"User-Agent": self.user_agent},
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session, self.timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
            self.session = None
            self.fetcher = None

    async def crawl(self) -> CrawlResult:
        if self.fetcher is None:
            raise RuntimeError("Fetcher not initialized, use 'async with LevelCrawler(...)'")

        limits = self.limits
        self.logger.info("Starting crawl at: %s", self.seed_url)
        start = time.monotonic()

        # dict keeps discovery order; only mutated between batches
        visited: Dict[str, None] = {self.seed_url: None}
        result = CrawlResult(seed_url=self.seed_url)
        frontier: List[str] = [self.seed_url]
        depth = 0

        while depth < limits.max_depth and frontier and len(visited) < limits.max_pages:
            self.logger.info("Depth %d: processing %d URLs", depth, len(frontier))
            next_frontier: List[str] = []
            for batch in _batches(frontier, limits.concurrency_limit):
                outcomes = await asyncio.gather(*(self.fetcher.fetch(url) for url in batch))
                for outcome in outcomes:
                    if isinstance(outcome, Failed):
                        result.failures.append(outcome)
                        continue
                    self.logger.debug("Crawled: %s", outcome.url)
                    for link in self._candidates(outcome, visited):
                        if len(visited) >= limits.max_pages:
                            break
                        visited[link] = None
                        next_frontier.append(link)
                if len(visited) >= limits.max_pages:
                    self.logger.info("Page limit %d reached", limits.max_pages)
                    break
            self.logger.info("Depth %d: found %d new URLs", depth, len(next_frontier))
            frontier = next_frontier
            depth += 1

        result.urls = list(visited)
        result.levels = depth
        duration = time.monotonic() - start
        self.logger.info(
            "Crawl finished: %d URLs, %d levels, %d failed fetches in %.2f s",
            len(result.urls), result.levels, len(result.failures), duration,
        )
        return result

    def _candidates(self, page: Page, visited: Dict[str, None]) -> Iterator[str]:
        """Same-origin links of *page* that are not in *visited* yet."""
        for link in extract_links(page.body, page.url):
            if link not in visited and same_origin(link, self.seed_url):
                yield link


async def crawl(
    seed_url: str,
    limits: CrawlLimits,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
    fetcher: Optional[PageFetcher] = None,
) -> set[str]:
    """Crawl from *seed_url* and return the set of discovered URLs (seed included).

    Raises InvalidUrlError if the seed is not an absolute http(s) URL.
    """
    crawler = LevelCrawler(seed_url, limits, timeout=timeout, user_agent=user_agent, fetcher=fetcher)
    async with crawler:
        result = await crawler.crawl()
    return result.url_set()
