# === FILE: site_crawler/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера SiteCrawler через командную строку.

Команды:
  crawl     Обойти сайт по конфигу и вывести/сохранить найденные URL
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH        Путь к YAML/JSON-конфигу (default: configs/default.yaml)
  --depth INT          Число уровней обхода (override limits.max_depth)
  --concurrency INT    Одновременных запросов в пакете (override limits.concurrency_limit)
  --limit INT          Макс. число URL (override limits.max_pages)
  --log-level LEVEL    Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH      Файл для логов (stderr, если не указан)
  --log-format FORMAT  Формат логирования

Команда crawl опции:
  --json PATH          Сохранить JSON-отчёт в файл
  --html PATH          Сохранить HTML-отчёт в файл
  --template DIR       Папка с Jinja2-шаблонами (по умолчанию встроенные)
  --manifest PATH      Сохранить список URL с именами страниц (urls.json)
  --pretty             Преформатировать JSON-вывод (отступ 2)
  --crawl-timeout SEC  Таймаут всего обхода (секунд)

Дополнительно:
  --version, -v        Показать версию SiteCrawler

Пример:
  site-crawler --depth 2 crawl --manifest urls.json --json report.json --pretty
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from site_crawler import __version__
from site_crawler.aggregator import aggregate_results
from site_crawler.config import load_config
from site_crawler.logger import DEFAULT_FORMAT, init_logging
from site_crawler.report.html_report import render_html
from site_crawler.report.json_report import render_json, render_manifest
from site_crawler.scanner import name_urls, start_crawl

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


async def _run(cfg, with_names: bool):
    result = await start_crawl(cfg)
    entries = await name_urls(cfg, result) if with_names else []
    return result, entries


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteCrawler, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default='configs/default.yaml',
    show_default=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option('--depth', '-d', 'depth', type=int, default=None,
              help='Число уровней обхода (override limits.max_depth)')
@click.option('--concurrency', '-n', 'concurrency', type=int, default=None,
              help='Одновременных запросов в пакете (override limits.concurrency_limit)')
@click.option('--limit', '-l', 'limit', type=int, default=None,
              help='Макс. число URL (override limits.max_pages)')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, depth, concurrency, limit, log_level, log_file, log_format):
    """Группа команд SiteCrawler CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
        cfg = cfg.with_limits(max_depth=depth, concurrency_limit=concurrency, max_pages=limit)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами'
)
@click.option(
    '--manifest', '-m', 'manifest_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить список URL с именами страниц'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl_command(ctx, json_output, html_output, template_dir, manifest_output, pretty, crawl_timeout):
    """Обойти сайт и сохранить найденные URL."""
    cfg = ctx.obj['config']
    with_names = manifest_output is not None
    try:
        if crawl_timeout:
            result, entries = asyncio.run(
                asyncio.wait_for(_run(cfg, with_names), timeout=crawl_timeout)
            )
        else:
            result, entries = asyncio.run(_run(cfg, with_names))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    # Если не сохраняем в файл — печатаем в stdout
    if not (json_output or html_output or manifest_output):
        indent = 2 if pretty else None
        click.echo(json.dumps(result.urls, ensure_ascii=False, indent=indent))
        return

    report = aggregate_results(result, entries)

    if manifest_output:
        try:
            saved = render_manifest(entries, manifest_output)
            click.echo(f'URL manifest: {saved}')
        except OSError as e:
            print_error(f'Ошибка при сохранении списка URL: {e}')

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
