# File: tests/conftest.py
from __future__ import annotations

from collections import defaultdict
from types import SimpleNamespace
from typing import Any, Callable, Dict, List, Optional

import pytest

from console_scout.config import CheckerConfig
from console_scout.logger import configure


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "browser: needs a real Playwright browser (skipped when none can be launched)",
    )


class FakePage:
    """Minimal stand-in for ``playwright.async_api.Page``: event emitter + goto/wait."""

    def __init__(self) -> None:
        self.listeners: Dict[str, List[Callable[[Any], None]]] = defaultdict(list)
        self.goto_calls: List[tuple] = []
        self.waits: List[float] = []
        self.goto_error: Optional[BaseException] = None
        self.during_goto: Optional[Callable[["FakePage"], None]] = None
        self.during_settle: Optional[Callable[["FakePage"], None]] = None

    def on(self, event: str, handler: Callable[[Any], None]) -> None:
        self.listeners[event].append(handler)

    def remove_listener(self, event: str, handler: Callable[[Any], None]) -> None:
        self.listeners[event].remove(handler)

    def emit(self, event: str, payload: Any) -> None:
        for handler in list(self.listeners[event]):
            handler(payload)

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.goto_calls.append((url, kwargs))
        if self.during_goto is not None:
            self.during_goto(self)
        if self.goto_error is not None:
            raise self.goto_error

    async def wait_for_timeout(self, timeout: float) -> None:
        self.waits.append(timeout)
        if self.during_settle is not None:
            self.during_settle(self)


def console_message(kind: str, text: str, url: str = "", line: int = 0) -> SimpleNamespace:
    return SimpleNamespace(
        type=kind,
        text=text,
        location={"url": url, "lineNumber": line, "columnNumber": 0},
    )


def failed_request(url: str, method: str = "GET", failure: Optional[str] = None) -> SimpleNamespace:
    return SimpleNamespace(url=url, method=method, failure=failure)


def page_error(message: str, stack: Optional[str] = None) -> SimpleNamespace:
    return SimpleNamespace(message=message, stack=stack)


@pytest.fixture()
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture()
def basic_config() -> CheckerConfig:
    """
    Return a valid CheckerConfig with short timings and without touching $HOME.
    """
    return CheckerConfig(
        target_url="http://localhost:3000",
        navigation_timeout=2.0,
        settle_time=0.1,
        home_dir=None,
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests rebind the project logger to CliRunner's stdout; restore it afterwards."""
    yield
    configure(level="INFO")
