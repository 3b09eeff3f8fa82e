# site_crawler/__init__.py
"""
SiteCrawler package initializer.
Defines package version and exposes the crawl entry point.
"""
__version__ = "0.1.0"

from site_crawler.config import CrawlLimits, CrawlerConfig
from site_crawler.crawler.crawler import LevelCrawler, crawl
from site_crawler.utils import InvalidUrlError

__all__ = ["__version__", "CrawlLimits", "CrawlerConfig", "LevelCrawler", "crawl", "InvalidUrlError"]
