# === FILE: site_crawler/parser/html_parser.py ===
"""HTML parsing helpers for SiteCrawler.

Only two things are ever read out of a page:

* anchor hrefs — raw ``href`` values of ``<a href="…">`` in document order,
  used by the link extractor;
* title — the document ``<title>`` text, used to name URLs in the manifest.

Both work on raw markup (``str``) and never resolve or filter URLs; that is
the job of :mod:`site_crawler.utils`.
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence

from bs4 import BeautifulSoup, SoupStrainer
from bs4.element import Tag

__all__: Sequence[str] = ("anchor_hrefs", "parse_title")

# parse only <a href> tags when looking for links
_ANCHORS = SoupStrainer("a", href=True)
_TITLE = SoupStrainer("title")


def anchor_hrefs(html: str) -> Iterator[str]:
    """Yield the raw ``href`` of every ``<a>`` element, in document order."""
    soup = BeautifulSoup(html, "html.parser", parse_only=_ANCHORS)
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if isinstance(href, str):
            yield href


def parse_title(html: str) -> str:
    """Return the stripped ``<title>`` text or ``""`` if the page has none."""
    soup = BeautifulSoup(html, "html.parser", parse_only=_TITLE)
    tag = soup.find("title")
    return tag.get_text(strip=True) if tag else ""
