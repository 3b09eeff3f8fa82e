"""site_crawler.report: Генерация отчётов (JSON, HTML) и файла со списком URL."""

from __future__ import annotations

from site_crawler.report.html_report import render_html
from site_crawler.report.json_report import render_json, render_manifest

__all__ = ["render_json", "render_html", "render_manifest"]
