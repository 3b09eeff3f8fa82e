# File: site_crawler/manifest.py
"""site_crawler.manifest: Именованный список URL для внешних инструментов визуального тестирования.

Каждому URL даётся имя из slug его ``<title>``; если заголовок получить не
удалось, имя строится из пути (``/`` -> ``home-page``). Стартовый URL
получает ``waitForTimeout`` = 1000 мс.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlsplit

from site_crawler.crawler.fetcher import PageFetcher
from site_crawler.crawler.models import Failed
from site_crawler.logger import logger
from site_crawler.parser.html_parser import parse_title
from site_crawler.utils import remove_duplicates, slugify

__all__ = ["ManifestEntry", "page_name", "build_manifest", "SEED_WAIT_MS"]

SEED_WAIT_MS = 1000
_UNUSABLE_NAMES = frozenset({"", "error", "no-title"})


@dataclass(slots=True)
class ManifestEntry:
    """Одна запись списка URL."""

    name: str
    url: str
    wait_for_timeout: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "url": self.url}
        if self.wait_for_timeout is not None:
            data["waitForTimeout"] = self.wait_for_timeout
        return data


def page_name(url: str, title: Optional[str]) -> str:
    """Имя страницы: slug заголовка или, если он пуст, slug пути."""
    name = slugify(title or "")
    if name not in _UNUSABLE_NAMES:
        return name
    path = urlsplit(url).path
    if path in ("", "/"):
        return "home-page"
    return slugify(path.replace("/", " "))


async def _fetch_title(fetcher: PageFetcher, url: str) -> Optional[str]:
    outcome = await fetcher.fetch(url)
    if isinstance(outcome, Failed):
        return None
    try:
        return parse_title(outcome.body)
    except Exception as exc:  # битый HTML не должен ронять весь список
        logger.debug("Title parse failed for %s: %s", url, exc)
        return None


async def build_manifest(
    urls: Iterable[str], seed_url: str, fetcher: PageFetcher
) -> List[ManifestEntry]:
    """Запрашивает заголовки страниц по очереди и собирает список ManifestEntry."""
    entries: List[ManifestEntry] = []
    for url in remove_duplicates(list(urls)):
        title = await _fetch_title(fetcher, url)
        entry = ManifestEntry(name=page_name(url, title), url=url)
        if url == seed_url:
            entry.wait_for_timeout = SEED_WAIT_MS
        entries.append(entry)
    logger.info("Named %d URLs", len(entries))
    return entries
