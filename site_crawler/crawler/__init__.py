"""Crawler core: fetcher, link extractor and the level scheduler."""
from site_crawler.crawler.crawler import LevelCrawler, crawl
from site_crawler.crawler.fetcher import Fetcher, PageFetcher
from site_crawler.crawler.link_extractor import extract_links
from site_crawler.crawler.models import CrawlResult, Failed, FetchOutcome, Page

__all__ = [
    "LevelCrawler",
    "crawl",
    "Fetcher",
    "PageFetcher",
    "extract_links",
    "CrawlResult",
    "Failed",
    "FetchOutcome",
    "Page",
]
