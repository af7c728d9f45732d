# File: console_scout/report/html_report.py
"""console_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from console_scout.aggregator import CheckOutcome, report_to_dict

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "report.html.j2"

_SECTION_TITLES = {
    "console_error": "Console errors",
    "console_warning": "Console warnings",
    "uncaught_exception": "Uncaught exceptions",
    "network_failure": "Network errors",
}


def render_html(
    outcome: CheckOutcome,
    template_dir: Union[Path, str, None],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        outcome: объект CheckOutcome.
        template_dir: директория с Jinja2-шаблонами (None: встроенный шаблон).
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = report_to_dict(outcome)
    context["section_titles"] = _SECTION_TITLES

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
