# File: tests/test_session.py
"""BrowserSession acquire/release with a fake Playwright driver."""
import asyncio
import os
from types import SimpleNamespace

import pytest

import console_scout.session as session_module
from console_scout.config import CheckerConfig
from console_scout.errors import LaunchError
from console_scout.session import BrowserSession


class FakeBrowser:
    def __init__(self, close_error=None):
        self.close_error = close_error
        self.closed = False
        self.pages = []

    async def new_page(self):
        page = SimpleNamespace(name=f"page{len(self.pages)}")
        self.pages.append(page)
        return page

    async def close(self):
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


class FakeEngine:
    def __init__(self, browser=None, launch_error=None):
        self.browser = browser
        self.launch_error = launch_error
        self.launch_kwargs = None

    async def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        if self.launch_error is not None:
            raise self.launch_error
        return self.browser


class FakePlaywright:
    def __init__(self, engine):
        self.chromium = engine
        self.firefox = engine
        self.webkit = engine
        self.stopped = False

    async def stop(self):
        self.stopped = True


def install_driver(monkeypatch, playwright):
    class _Starter:
        async def start(self):
            return playwright

    monkeypatch.setattr(session_module, "async_playwright", lambda: _Starter())


@pytest.mark.asyncio()
async def test_acquire_opens_one_headless_page(monkeypatch, basic_config):
    browser = FakeBrowser()
    engine = FakeEngine(browser=browser)
    playwright = FakePlaywright(engine)
    install_driver(monkeypatch, playwright)

    async with BrowserSession(basic_config) as page:
        assert page is browser.pages[0]
        assert engine.launch_kwargs == {"headless": True}

    assert len(browser.pages) == 1
    assert browser.closed
    assert playwright.stopped


@pytest.mark.asyncio()
async def test_launch_failure_raises_launch_error_and_cleans_up(monkeypatch, basic_config):
    playwright = FakePlaywright(FakeEngine(launch_error=RuntimeError("Executable doesn't exist")))
    install_driver(monkeypatch, playwright)

    session = BrowserSession(basic_config)
    with pytest.raises(LaunchError, match="Executable doesn't exist"):
        await session.acquire()
    assert playwright.stopped
    with pytest.raises(RuntimeError):
        session.page


@pytest.mark.asyncio()
async def test_release_swallows_close_errors(monkeypatch, basic_config):
    browser = FakeBrowser(close_error=RuntimeError("Target closed"))
    playwright = FakePlaywright(FakeEngine(browser=browser))
    install_driver(monkeypatch, playwright)

    session = BrowserSession(basic_config)
    await session.acquire()
    await session.release()
    await session.release()  # idempotent

    assert browser.closed
    assert playwright.stopped


@pytest.mark.asyncio()
async def test_release_runs_when_body_fails(monkeypatch, basic_config):
    browser = FakeBrowser()
    playwright = FakePlaywright(FakeEngine(browser=browser))
    install_driver(monkeypatch, playwright)

    with pytest.raises(ValueError):
        async with BrowserSession(basic_config):
            raise ValueError("navigation blew up")
    assert browser.closed


@pytest.mark.asyncio()
async def test_home_override_is_applied_before_launch(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", "/original/home")
    seen = {}

    class RecordingEngine(FakeEngine):
        async def launch(self, **kwargs):
            seen["home"] = os.environ["HOME"]
            return await super().launch(**kwargs)

    install_driver(monkeypatch, FakePlaywright(RecordingEngine(browser=FakeBrowser())))
    cfg = CheckerConfig(home_dir=str(tmp_path), headless=False)

    session = BrowserSession(cfg)
    await session.acquire()
    await session.release()

    assert seen["home"] == str(tmp_path)


@pytest.mark.asyncio()
@pytest.mark.parametrize("interruption", [asyncio.CancelledError, KeyboardInterrupt])
async def test_interrupted_launch_still_stops_the_driver(monkeypatch, basic_config, interruption):
    playwright = FakePlaywright(FakeEngine(launch_error=interruption()))
    install_driver(monkeypatch, playwright)

    with pytest.raises(interruption):
        async with BrowserSession(basic_config):
            pass  # pragma: no cover

    assert playwright.stopped
