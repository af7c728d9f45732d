# File: console_scout/report/__init__.py
"""console_scout.report: сохранение итогов проверки в файлы (JSON и HTML)."""

from __future__ import annotations

from console_scout.report.html_report import DEFAULT_TEMPLATE_DIR, render_html
from console_scout.report.json_report import render_json

__all__ = ["render_json", "render_html", "DEFAULT_TEMPLATE_DIR"]
