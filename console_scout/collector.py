# console_scout/collector.py
"""
Signal collector: turns page events into typed records.

Listens on three Playwright page events (``console``, ``pageerror``,
``requestfailed``) which feed the four report buckets. Every handler only
appends to the bucket of the record it builds, so no locking is involved.
"""
from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from playwright.async_api import ConsoleMessage, Error, Page, Request

from console_scout.logger import logger
from console_scout.models import (
    ConsoleError,
    ConsoleWarning,
    NetworkFailure,
    Report,
    SourceLocation,
    UncaughtException,
)

UNKNOWN_NETWORK_ERROR = "Unknown error"

__all__ = ["SignalCollector", "UNKNOWN_NETWORK_ERROR"]


def _location_of(message: ConsoleMessage) -> Optional[SourceLocation]:
    raw = message.location or {}
    url = raw.get("url") or ""
    if not url:
        return None
    return SourceLocation(
        url=url,
        line=int(raw.get("lineNumber") or 0),
        column=int(raw.get("columnNumber") or 0),
    )


class SignalCollector:
    """Subscription handle over one page's event channels."""

    def __init__(self) -> None:
        self.report = Report()
        self._page: Optional[Page] = None
        self._listeners: List[Tuple[str, Callable[[Any], None]]] = [
            ("console", self._on_console),
            ("pageerror", self._on_page_error),
            ("requestfailed", self._on_request_failed),
        ]

    @property
    def attached(self) -> bool:
        return self._page is not None

    def attach(self, page: Page) -> Report:
        """Subscribe to *page* and return the report the handlers fill."""
        if self._page is not None:
            raise RuntimeError("collector is already attached to a page")
        for event, handler in self._listeners:
            page.on(event, handler)
        self._page = page
        logger.debug("Signal collector attached")
        return self.report

    def detach(self) -> None:
        if self._page is None:
            return
        for event, handler in self._listeners:
            self._page.remove_listener(event, handler)
        self._page = None
        logger.debug("Signal collector detached, %d records", len(self.report))

    # -- handlers ---------------------------------------------------------- #

    def _on_console(self, message: ConsoleMessage) -> None:
        kind = message.type
        if kind == "error":
            self.report.add(ConsoleError(message=message.text, location=_location_of(message)))
        elif kind == "warning":
            self.report.add(ConsoleWarning(message=message.text, location=_location_of(message)))

    def _on_page_error(self, error: Error) -> None:
        message = getattr(error, "message", None) or str(error)
        stack = getattr(error, "stack", None) or None
        self.report.add(UncaughtException(message=message, stack_trace=stack))

    def _on_request_failed(self, request: Request) -> None:
        self.report.add(
            NetworkFailure(
                url=request.url,
                method=request.method,
                error_text=request.failure or UNKNOWN_NETWORK_ERROR,
            )
        )
