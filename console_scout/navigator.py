# console_scout/navigator.py
"""
Navigation driver: load the target until the network goes quiet, then settle.
"""
from __future__ import annotations

from typing import Final

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from console_scout.errors import NavigationError, NavigationTimeout
from console_scout.logger import logger

#: Quiet period with no in-flight connections that Playwright's ``networkidle``
#: treats as quiescence. Fixed inside Playwright; kept here for reference only.
NETWORK_IDLE_WINDOW_MS: Final[int] = 500

#: Success signal passed to ``page.goto``.
WAIT_UNTIL: Final[str] = "networkidle"

__all__ = ["navigate", "settle", "NETWORK_IDLE_WINDOW_MS", "WAIT_UNTIL"]


async def navigate(page: Page, url: str, timeout: float) -> None:
    """
    Navigate *page* to *url* and wait for network quiescence.

    Parameters
    ----------
    timeout
        Hard limit in seconds, measured from navigation start.

    Raises
    ------
    NavigationTimeout
        Quiescence was not reached in time. Signals already collected stay valid.
    NavigationError
        Any other navigation failure (DNS, refused connection, aborted load).
    """
    logger.info("Navigating to %s...", url)
    try:
        await page.goto(url, wait_until=WAIT_UNTIL, timeout=timeout * 1000)
    except PlaywrightTimeoutError as exc:
        raise NavigationTimeout(
            f"{url} did not reach network idle within {timeout:g}s"
        ) from exc
    except PlaywrightError as exc:
        raise NavigationError(f"navigation to {url} failed: {exc.message}") from exc
    logger.info("Page loaded successfully")


async def settle(page: Page, seconds: float) -> None:
    """Hold the page idle so late timers, rejections and requests still get observed."""
    if seconds <= 0:
        return
    logger.info("Waiting %gs to capture delayed errors...", seconds)
    await page.wait_for_timeout(seconds * 1000)
