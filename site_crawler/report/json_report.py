# site_crawler/report/json_report.py

"""
Генерация JSON-файлов для проекта SiteCrawler.

Сериализация отчёта CrawlReport и именованного списка URL в файл.
"""
import json
from pathlib import Path
from typing import Any, Iterable

from site_crawler.aggregator import CrawlReport
from site_crawler.manifest import ManifestEntry


def _write(data: Any, output_path: Path | str) -> Path:
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    # Запись в файл с отступами и Unicode
    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return output


def render_json(report: CrawlReport, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект CrawlReport с результатами обхода
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from site_crawler.report.json_report import render_json
    report_path = render_json(report, 'reports/report.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    return _write(report.as_dict(), output_path)


def render_manifest(entries: Iterable[ManifestEntry], output_path: Path | str) -> Path:
    """
    Сохраняет список ``[{"name", "url", "waitForTimeout"?}]`` (формат urls.json).
    """
    return _write([e.to_dict() for e in entries], output_path)
