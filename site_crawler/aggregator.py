# File: site_crawler/aggregator.py
"""site_crawler.aggregator: Сборка результатов обхода в отчёт."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TypedDict

from site_crawler.crawler.models import CrawlResult
from site_crawler.manifest import ManifestEntry


class FailureInfo(TypedDict):
    """URL, который не удалось загрузить, и причина."""

    url: str
    reason: str


@dataclass(slots=True)
class CrawlReport:
    """Результаты обхода сайта: найденные URL, имена страниц и ошибки загрузки."""

    seed_url: str
    urls: List[str] = field(default_factory=list)
    entries: List[Dict[str, Any]] = field(default_factory=list)
    levels: int = 0
    failures: List[FailureInfo] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "seed_url": self.seed_url,
            "total": len(self.urls),
            "levels": self.levels,
            "urls": self.urls,
            "entries": self.entries,
            "failures": self.failures,
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)


def aggregate_results(
    result: CrawlResult, entries: Optional[Sequence[ManifestEntry]] = None
) -> CrawlReport:
    """Собирает CrawlResult и (необязательно) именованный список URL в CrawlReport."""
    return CrawlReport(
        seed_url=result.seed_url,
        urls=list(result.urls),
        entries=[e.to_dict() for e in entries or ()],
        levels=result.levels,
        failures=[{"url": f.url, "reason": f.reason} for f in result.failures],
    )
