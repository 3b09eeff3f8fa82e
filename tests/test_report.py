# File: tests/test_report.py
import json

import pytest

from site_crawler.aggregator import aggregate_results
from site_crawler.crawler.models import CrawlResult, Failed
from site_crawler.manifest import ManifestEntry
from site_crawler.report import render_html, render_json, render_manifest

SEED = "http://a.com"


@pytest.fixture()
def crawl_result() -> CrawlResult:
    return CrawlResult(
        seed_url=SEED,
        urls=[SEED, f"{SEED}/about", f"{SEED}/<script>"],
        levels=2,
        failures=[Failed(f"{SEED}/slow", "timeout")],
    )


@pytest.fixture()
def entries():
    return [ManifestEntry("home-page", SEED, 1000), ManifestEntry("about", f"{SEED}/about")]


def test_aggregate_results(crawl_result, entries):
    report = aggregate_results(crawl_result, entries)
    assert report.urls == crawl_result.urls
    assert report.levels == 2
    assert report.failures == [{"url": f"{SEED}/slow", "reason": "timeout"}]
    assert report.entries[0] == {"name": "home-page", "url": SEED, "waitForTimeout": 1000}
    assert json.loads(report.json())["total"] == 3


def test_render_json(tmp_path, crawl_result):
    path = render_json(aggregate_results(crawl_result), tmp_path / "nested" / "report.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["seed_url"] == SEED
    assert data["entries"] == []
    assert data["urls"][1] == f"{SEED}/about"


def test_render_manifest(tmp_path, entries):
    path = render_manifest(entries, tmp_path / "urls.json")
    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"name": "home-page", "url": SEED, "waitForTimeout": 1000},
        {"name": "about", "url": f"{SEED}/about"},
    ]


def test_render_html_escapes_urls(tmp_path, crawl_result):
    path = render_html(aggregate_results(crawl_result), None, tmp_path / "report.html")
    html = path.read_text(encoding="utf-8")
    assert "Found 3 URLs" in html
    assert "&lt;script&gt;" in html
    assert "<script>" not in html
    assert "timeout" in html


def test_render_html_with_entries(tmp_path, crawl_result, entries):
    path = render_html(aggregate_results(crawl_result, entries), None, tmp_path / "report.html")
    html = path.read_text(encoding="utf-8")
    assert "home-page" in html
    assert "<table>" in html


def test_render_html_custom_template(tmp_path, crawl_result):
    (tmp_path / "tpl").mkdir()
    (tmp_path / "tpl" / "report.html.j2").write_text("{{ urls | length }} from {{ seed_url }}", encoding="utf-8")
    path = render_html(aggregate_results(crawl_result), tmp_path / "tpl", tmp_path / "out.html")
    assert path.read_text(encoding="utf-8") == f"3 from {SEED}"
