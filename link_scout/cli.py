# === FILE: link_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска LinkScout через командную строку.

Команды:
  check URL   Проверить все ссылки страницы и вывести/сохранить отчёт
  config      Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда check опции:
  --max-links INT     Макс. число проверяемых ссылок (override max_links)
  --timeout SEC       Таймаут одного запроса
  --method METHOD     HEAD или GET
  --concurrency INT   Лимит одновременных проверок
  --resolve-relative  Разрешать относительные пути вида img/x.png
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --scan-timeout SEC  Таймаут всей проверки (секунд)
  --fail-on-broken    Код выхода 2, если найдены битые ссылки

Пример:
  link_scout check example.com --json report.json --max-links 100
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from link_scout import __version__
from link_scout.config import load_config
from link_scout.crawler.models import PageFetchError
from link_scout.engine import run_check
from link_scout.logger import DEFAULT_FORMAT, init_logging
from link_scout.report.html_report import render_html
from link_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

EXIT_BROKEN_LINKS = 2


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
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
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд LinkScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--max-links', '-n', 'max_links', type=int, default=None,
              help='Макс. число проверяемых ссылок (override max_links)')
@click.option('--timeout', 'timeout', type=float, default=None,
              help='Таймаут одного запроса (секунд)')
@click.option('--method', 'check_method', type=click.Choice(['HEAD', 'GET'], case_sensitive=False),
              default=None, help='HTTP-метод проверки ссылок')
@click.option('--concurrency', type=int, default=None,
              help='Лимит одновременных проверок')
@click.option('--resolve-relative', 'resolve_relative', is_flag=True, default=None,
              help='Разрешать относительные пути вида img/x.png')
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
    help='Папка с Jinja2-шаблонами (по умолчанию встроенный шаблон)'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option('--scan-timeout', 'scan_timeout', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Таймаут всей проверки (секунд)')
@click.option('--fail-on-broken', is_flag=True, help='Код выхода 2, если найдены битые ссылки')
@click.pass_context
def check(ctx, url, max_links, timeout, check_method, concurrency, resolve_relative,
          json_output, html_output, template_dir, pretty, scan_timeout, fail_on_broken):
    """Проверить ссылки страницы URL и сгенерировать отчёт."""
    try:
        cfg = ctx.obj['config'].with_overrides(
            max_links=max_links,
            timeout=timeout,
            check_method=check_method,
            concurrency=concurrency,
            resolve_relative=resolve_relative or None,
        )
    except ValidationError as e:
        print_error(f'Неверные параметры: {e}')

    try:
        report = run_check(cfg, url, timeout=scan_timeout)
    except asyncio.TimeoutError:
        print_error(f'Проверка не завершена за {scan_timeout} секунд')
    except PageFetchError as e:
        print_error(f'Не удалось загрузить страницу: {e}')

    if not json_output and not html_output:
        click.echo(report.json(pretty=pretty))
    else:
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
            except OSError as e:
                print_error(f'Ошибка при сохранении HTML: {e}')

        click.echo(
            f'Total: {report.total}, working: {report.working_count}, broken: {report.broken_count}'
        )

    if fail_on_broken and report.broken_count:
        ctx.exit(EXIT_BROKEN_LINKS)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
