# File: console_scout/aggregator.py
"""console_scout.aggregator: текстовый отчёт, вердикт и код выхода по собранным сигналам."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Sequence

from console_scout.models import (
    ConsoleError,
    ConsoleWarning,
    NetworkFailure,
    Report,
    SignalKind,
    SignalRecord,
    UncaughtException,
    Verdict,
)

__all__ = [
    "CheckOutcome",
    "reduce",
    "exit_code_for",
    "render",
    "report_to_dict",
]

_HEAVY_RULE = "═" * 59
_LIGHT_RULE = "─" * 57

_EXIT_CODES: Dict[Verdict, int] = {
    Verdict.CLEAN: 0,
    Verdict.WARNINGS_ONLY: 0,
    Verdict.FAILED: 1,
}

_VERDICT_LINES: Dict[Verdict, str] = {
    Verdict.CLEAN: "🎉 SUCCESS! No errors or warnings detected!",
    Verdict.WARNINGS_ONLY: "⚠️  No errors, but warnings were detected.",
    Verdict.FAILED: "❌ FAILED! Errors were detected.",
}


@dataclass(slots=True)
class CheckOutcome:
    """Итог одного запуска: отчёт, вердикт и обстоятельства навигации."""

    target_url: str
    report: Report
    verdict: Verdict
    navigation_timed_out: bool = False
    duration: float = 0.0

    @property
    def exit_code(self) -> int:
        return exit_code_for(self.verdict)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление итога."""
        return json.dumps(report_to_dict(self), ensure_ascii=False, indent=2 if pretty else None)


# --------------------------------------------------------------------------- #
# Verdict                                                                     #
# --------------------------------------------------------------------------- #


def reduce(report: Report) -> Verdict:
    """Ошибки важнее предупреждений; отсутствие и тех и других означает успех."""
    if report.hard_error_count > 0:
        return Verdict.FAILED
    if report.warning_count > 0:
        return Verdict.WARNINGS_ONLY
    return Verdict.CLEAN


def exit_code_for(verdict: Verdict) -> int:
    return _EXIT_CODES[verdict]


# --------------------------------------------------------------------------- #
# Text rendering                                                              #
# --------------------------------------------------------------------------- #


def _console_lines(record: ConsoleError | ConsoleWarning) -> List[str]:
    lines = [record.message]
    if record.location is not None:
        lines.append(f"   Location: {record.location.url}:{record.location.line}")
    return lines


def _exception_lines(record: UncaughtException) -> List[str]:
    lines = [record.message]
    if record.stack_trace:
        lines.append("   Stack trace:")
        lines.extend(f"   {line}" for line in record.stack_trace.splitlines())
    return lines


def _network_lines(record: NetworkFailure) -> List[str]:
    return [f"{record.method} {record.url}", f"   Error: {record.error_text}"]


_SECTIONS: Sequence[tuple[SignalKind, str, Callable[[Any], List[str]]]] = (
    (SignalKind.CONSOLE_ERROR, "🔴 CONSOLE ERRORS", _console_lines),
    (SignalKind.CONSOLE_WARNING, "⚠️  CONSOLE WARNINGS", _console_lines),
    (SignalKind.UNCAUGHT_EXCEPTION, "💥 UNCAUGHT EXCEPTIONS", _exception_lines),
    (SignalKind.NETWORK_FAILURE, "🌐 NETWORK ERRORS", _network_lines),
)


def _banner(title: str) -> List[str]:
    return [_HEAVY_RULE, title.center(len(_HEAVY_RULE)).rstrip(), _HEAVY_RULE]


def _render_section(
    title: str, records: Sequence[SignalRecord], describe: Callable[[Any], List[str]]
) -> List[str]:
    lines = [f"{title} ({len(records)})", _LIGHT_RULE]
    if not records:
        lines.append("✅ none found")
        return lines
    for index, record in enumerate(records, start=1):
        first, *rest = describe(record)
        lines.append(f"{index}. {first}")
        lines.extend(rest)
    return lines


def render(report: Report) -> str:
    """Человекочитаемый отчёт: четыре секции, сводка и строка вердикта."""
    lines = _banner("ERROR REPORT")
    for kind, title, describe in _SECTIONS:
        lines.append("")
        lines.extend(_render_section(title, report.bucket(kind), describe))
    lines.append("")
    lines.extend(_banner("SUMMARY"))
    lines.append(f"Total Errors: {report.hard_error_count}")
    lines.append(f"Total Warnings: {report.warning_count}")
    lines.append("")
    lines.append(_VERDICT_LINES[reduce(report)])
    return "\n".join(lines)


# --------------------------------------------------------------------------- #
# Structured form (JSON / HTML reports)                                       #
# --------------------------------------------------------------------------- #


def _iso(ts: float) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).isoformat()


def _record_to_dict(record: SignalRecord) -> Dict[str, Any]:
    data: Dict[str, Any] = {"kind": record.kind.value, "observed_at": _iso(record.observed_at)}
    if isinstance(record, (ConsoleError, ConsoleWarning)):
        data["message"] = record.message
        data["location"] = (
            None
            if record.location is None
            else {
                "url": record.location.url,
                "line": record.location.line,
                "column": record.location.column,
            }
        )
    elif isinstance(record, UncaughtException):
        data["message"] = record.message
        data["stack_trace"] = record.stack_trace
    else:
        data["url"] = record.url
        data["method"] = record.method
        data["error_text"] = record.error_text
    return data


def report_to_dict(outcome: CheckOutcome) -> Dict[str, Any]:
    """Собирает итог запуска в словарь, пригодный для JSON и шаблонов."""
    report = outcome.report
    return {
        "target_url": outcome.target_url,
        "verdict": outcome.verdict.value,
        "exit_code": outcome.exit_code,
        "navigation_timed_out": outcome.navigation_timed_out,
        "duration": round(outcome.duration, 3),
        "totals": {
            "errors": report.hard_error_count,
            "warnings": report.warning_count,
        },
        "signals": {
            kind.value: [_record_to_dict(r) for r in report.bucket(kind)] for kind in SignalKind
        },
    }
