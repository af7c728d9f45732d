# === FILE: console_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска ConsoleScout через командную строку.

Команды:
  check     Открыть страницу в браузере, собрать сигналы и вывести отчёт (по умолчанию)
  config    Показать итоговую конфигурацию

Общие опции:
  --url, -u URL       Проверяемая страница (иначе $TARGET_URL, иначе http://localhost:3000)
  --timeout SEC       Жёсткий таймаут навигации (секунд)
  --settle SEC        Пауза после загрузки для поздних сигналов (секунд)
  --browser NAME      chromium | firefox | webkit
  --headed            Показать окно браузера
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда check опции:
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами

Коды выхода:
  0  ошибок нет (предупреждения допускаются)
  1  найдены ошибки, либо браузер не запустился или навигация не удалась

Пример:
  TARGET_URL=http://localhost:8080 console-scout --json reports/console.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from console_scout import __version__
from console_scout.aggregator import render
from console_scout.config import load_config
from console_scout.engine import start_check
from console_scout.errors import LaunchError, NavigationError
from console_scout.logger import configure as configure_logging
from console_scout.report.html_report import render_html
from console_scout.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, '--version', '-v', message='ConsoleScout, version %(version)s')
@click.option(
    '--url', '-u', 'target_url',
    default=None,
    help='URL проверяемой страницы (иначе $TARGET_URL, иначе http://localhost:3000).'
)
@click.option(
    '--timeout', 'navigation_timeout',
    type=float,
    default=None,
    help='Жёсткий таймаут навигации, секунд [30]'
)
@click.option(
    '--settle', 'settle_time',
    type=float,
    default=None,
    help='Ожидание поздних сигналов после загрузки, секунд [3]'
)
@click.option(
    '--browser', 'browser',
    type=click.Choice(['chromium', 'firefox', 'webkit']),
    default=None,
    help='Движок браузера [chromium]'
)
@click.option(
    '--headed', is_flag=True,
    help='Запустить браузер с окном'
)
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
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, target_url, navigation_timeout, settle_time, browser, headed,
        log_level, log_file, log_format):
    """Проверка консоли браузера: ошибки, предупреждения, исключения и сбои сети."""
    configure_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(
            target_url,
            navigation_timeout=navigation_timeout,
            settle_time=settle_time,
            browser=browser,
            headless=False if headed else None,
        )
    except ValidationError as e:
        print_error(f'Ошибка конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg
    if ctx.invoked_subcommand is None:
        ctx.invoke(check)


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
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
@click.pass_context
def check(ctx, json_output, html_output, template_dir):
    """Открыть страницу, собрать сигналы и вывести отчёт."""
    cfg = ctx.obj['config']
    try:
        outcome = asyncio.run(start_check(cfg))
    except LaunchError as e:
        print_error(f'❌ Browser launch failed: {e}')
    except NavigationError as e:
        print_error(f'❌ Navigation failed: {e}')
    except Exception as e:
        print_error(f'❌ Error during execution: {e}')

    if outcome.navigation_timed_out:
        click.secho(
            f'⏱  Navigation to {outcome.target_url} timed out after '
            f'{cfg.navigation_timeout:g}s; the report below is based on partial data.',
            fg='yellow'
        )
    click.echo(render(outcome.report))

    if json_output:
        try:
            saved_json = render_json(outcome, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(outcome, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    ctx.exit(outcome.exit_code)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


def main():
    cli(prog_name='console-scout')


if __name__ == "__main__":
    main()
