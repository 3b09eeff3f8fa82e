# File: tests/test_manifest.py
import pytest

from conftest import FakeFetcher
from site_crawler.manifest import ManifestEntry, build_manifest, page_name

SEED = "http://a.com"


@pytest.mark.parametrize(
    "url,title,expected",
    [
        ("http://a.com/about", "About Us", "about-us"),
        ("http://a.com", None, "home-page"),
        ("http://a.com/", "", "home-page"),
        ("http://a.com/blog/post-1", None, "blog-post-1"),
        ("http://a.com/blog/", "Error", "blog"),
        ("http://a.com/x", "No Title", "x"),
        ("http://a.com/x", "!!!", "x"),
    ],
)
def test_page_name(url, title, expected):
    assert page_name(url, title) == expected


def test_entry_to_dict():
    assert ManifestEntry("home-page", SEED, 1000).to_dict() == {
        "name": "home-page",
        "url": SEED,
        "waitForTimeout": 1000,
    }
    assert ManifestEntry("about", f"{SEED}/about").to_dict() == {"name": "about", "url": f"{SEED}/about"}


@pytest.mark.asyncio()
async def test_build_manifest():
    fetcher = FakeFetcher(
        {
            SEED: "<title>Welcome Home</title>",
            f"{SEED}/about": "<html><head><title>About</title></head></html>",
            f"{SEED}/untitled": "<p>nothing</p>",
        },
        timeouts={f"{SEED}/slow"},
    )
    urls = [SEED, f"{SEED}/about", f"{SEED}/untitled", f"{SEED}/slow", f"{SEED}/about"]

    entries = await build_manifest(urls, SEED, fetcher)

    assert [e.to_dict() for e in entries] == [
        {"name": "welcome-home", "url": SEED, "waitForTimeout": 1000},
        {"name": "about", "url": f"{SEED}/about"},
        {"name": "untitled", "url": f"{SEED}/untitled"},
        {"name": "slow", "url": f"{SEED}/slow"},
    ]
    # one request per distinct URL, in order
    assert fetcher.calls == urls[:4]
