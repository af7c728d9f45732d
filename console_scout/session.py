# console_scout/session.py
"""
Browser session manager: one browser process, one page, guaranteed release.
"""
from __future__ import annotations

import os
from typing import Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright

from console_scout.config import CheckerConfig
from console_scout.errors import LaunchError
from console_scout.logger import logger

__all__ = ["BrowserSession"]


class BrowserSession:
    """
    Owns the Playwright driver, the browser process and its single page.

    Use as ``async with BrowserSession(cfg) as page: ...``; :meth:`release`
    runs on every exit path and never raises.
    """

    def __init__(self, config: CheckerConfig) -> None:
        self.config = config
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("Browser session not started. Use async with or call acquire().")
        return self._page

    async def acquire(self) -> Page:
        """Start the browser and open exactly one page; raise LaunchError on failure."""
        if self.config.home_dir is not None:
            # the browser writes profile/cache data under $HOME
            os.environ["HOME"] = self.config.home_dir

        logger.info("Launching browser (%s)...", self.config.browser)
        try:
            self._playwright = await async_playwright().start()
            engine = getattr(self._playwright, self.config.browser)
            self._browser = await engine.launch(headless=self.config.headless)
            self._page = await self._browser.new_page()
        except Exception as exc:
            await self.release()
            raise LaunchError(f"could not start {self.config.browser}: {exc}") from exc
        except BaseException:
            # cancelled or interrupted mid-launch: __aexit__ will not run
            await self.release()
            raise
        return self._page

    async def release(self) -> None:
        """Close the browser and stop the driver. Errors are logged, not raised."""
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        self._page = None

        if browser is not None:
            try:
                await browser.close()
                logger.info("Browser closed")
            except Exception as exc:
                logger.warning("Failed to close browser: %s", exc)
        if playwright is not None:
            try:
                await playwright.stop()
            except Exception as exc:
                logger.warning("Failed to stop Playwright driver: %s", exc)

    async def __aenter__(self) -> Page:
        return await self.acquire()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.release()
