# site_crawler/crawler/models.py
"""
Data models for the SiteCrawler crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True, slots=True)
class Page:
    """Successful fetch: the page URL and its decoded body."""

    url: str
    body: str


@dataclass(frozen=True, slots=True)
class Failed:
    """Failed fetch: the URL and a short human-readable reason."""

    url: str
    reason: str


FetchOutcome = Union[Page, Failed]


@dataclass(slots=True)
class CrawlResult:
    """Everything one crawl produced.

    ``urls`` is the visited set in discovery order (seed first),
    ``levels`` the number of levels actually traversed.
    """

    seed_url: str
    urls: List[str] = field(default_factory=list)
    levels: int = 0
    failures: List[Failed] = field(default_factory=list)

    def url_set(self) -> set[str]:
        return set(self.urls)
