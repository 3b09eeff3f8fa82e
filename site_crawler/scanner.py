# === FILE: site_crawler/scanner.py ===
"""
Модуль-обёртка для запуска обхода и именования найденных URL по конфигу.
"""
from typing import List

from aiohttp import ClientSession, ClientTimeout

from site_crawler.config import CrawlerConfig
from site_crawler.crawler.crawler import LevelCrawler
from site_crawler.crawler.fetcher import Fetcher
from site_crawler.crawler.models import CrawlResult
from site_crawler.manifest import ManifestEntry, build_manifest


async def start_crawl(cfg: CrawlerConfig) -> CrawlResult:
    """
    Запускает LevelCrawler в контексте и возвращает CrawlResult.

    Parameters
    ----------
    cfg : CrawlerConfig
        Конфигурация обхода.

    Returns
    -------
    CrawlResult
        Найденные URL (в порядке обнаружения), число уровней и ошибки загрузки.
    """
    crawler = LevelCrawler(
        str(cfg.seed_url),
        cfg.limits,
        timeout=cfg.timeout,
        user_agent=cfg.user_agent,
    )
    async with crawler:
        return await crawler.crawl()


async def name_urls(cfg: CrawlerConfig, result: CrawlResult) -> List[ManifestEntry]:
    """Загружает заголовки найденных страниц и строит именованный список URL."""
    async with ClientSession(
        timeout=ClientTimeout(total=cfg.timeout),
        headers={"User-Agent": cfg.user_agent},
    ) as session:
        return await build_manifest(result.urls, result.seed_url, Fetcher(session, cfg.timeout))


__all__ = ["start_crawl", "name_urls"]
