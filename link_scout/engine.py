# File: link_scout/engine.py
"""link_scout.engine: запуск проверки страницы для CLI и тестов."""

from __future__ import annotations

import asyncio
from typing import Optional

from link_scout.aggregator import CrawlReport
from link_scout.config import CheckerConfig
from link_scout.crawler.crawler import LinkChecker
from link_scout.logger import logger

__all__ = ["start_check", "run_check"]


async def start_check(cfg: CheckerConfig, url: str) -> CrawlReport:
    """
    Запускает LinkChecker в контексте и возвращает CrawlReport.

    Parameters
    ----------
    cfg : CheckerConfig
        Конфигурация проверки.
    url : str
        Адрес страницы; без схемы подставляется ``https://``.
    """
    async with LinkChecker(cfg) as checker:
        return await checker.check(url)


def run_check(cfg: CheckerConfig, url: str, timeout: Optional[float] = None) -> CrawlReport:
    """Синхронная обёртка над start_check с необязательным таймаутом на весь прогон."""
    logger.info("Starting check…")
    try:
        if timeout is not None:
            return asyncio.run(asyncio.wait_for(start_check(cfg, url), timeout=timeout))
        return asyncio.run(start_check(cfg, url))
    except asyncio.TimeoutError:
        logger.error("Check did not finish within %s seconds", timeout)
        raise
    except Exception as exc:
        logger.error("Check failed: %s", exc)
        raise
