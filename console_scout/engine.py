# File: console_scout/engine.py
"""console_scout.engine: оркестрация одного запуска: браузер, подписка, навигация, отчёт."""

from __future__ import annotations

import time

from console_scout.aggregator import CheckOutcome, reduce
from console_scout.collector import SignalCollector
from console_scout.config import CheckerConfig
from console_scout.errors import NavigationTimeout
from console_scout.logger import logger
from console_scout.navigator import navigate, settle
from console_scout.session import BrowserSession

__all__ = ["start_check"]


async def start_check(cfg: CheckerConfig) -> CheckOutcome:
    """
    Запускает браузер, наблюдает за страницей и возвращает итог проверки.

    Таймаут навигации не прерывает проверку: отчёт строится по сигналам,
    собранным до таймаута. LaunchError и прочие NavigationError
    пробрасываются после освобождения браузера.
    """
    logger.info("Starting console error check for %s", cfg.target_url)
    started = time.monotonic()
    collector = SignalCollector()
    timed_out = False

    async with BrowserSession(cfg) as page:
        report = collector.attach(page)
        try:
            await navigate(page, cfg.target_url, cfg.navigation_timeout)
        except NavigationTimeout as exc:
            logger.warning("Navigation timed out, reporting partial data: %s", exc)
            timed_out = True
        else:
            await settle(page, cfg.settle_time)
        finally:
            collector.detach()

    report.freeze()
    verdict = reduce(report)
    logger.info(
        "Check finished: %d errors, %d warnings, verdict=%s",
        report.hard_error_count,
        report.warning_count,
        verdict.value,
    )
    return CheckOutcome(
        target_url=cfg.target_url,
        report=report,
        verdict=verdict,
        navigation_timed_out=timed_out,
        duration=time.monotonic() - started,
    )
