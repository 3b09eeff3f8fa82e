# site_crawler/crawler/link_extractor.py
"""
Link extraction for SiteCrawler.
"""
from __future__ import annotations

from typing import Iterator

from site_crawler.logger import get_logger
from site_crawler.parser.html_parser import anchor_hrefs
from site_crawler.utils import normalize_url

_log = get_logger("links")


def extract_links(body: str, page_url: str) -> Iterator[str]:
    """
    Yield normalized absolute links found in *body*, in document order.

    Hrefs that do not resolve to a valid http(s) URL are skipped.
    Duplicates are kept; the scheduler dedupes against its visited set.
    Markup the parser chokes on counts as a page with no links.
    """
    try:
        hrefs = list(anchor_hrefs(body))
    except Exception as exc:  # bs4 may raise assorted errors on broken markup
        _log.debug("Could not parse %s: %s", page_url, exc)
        return
    for href in hrefs:
        link = normalize_url(href, page_url)
        if link is not None:
            yield link
