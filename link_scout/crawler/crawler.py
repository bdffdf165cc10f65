# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from typing import List, Optional

from aiohttp import ClientSession, ClientTimeout

from link_scout.aggregator import CrawlReport, assemble
from link_scout.config import CheckerConfig
from link_scout.crawler.batch import run_batch
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.link_extractor import extract_links
from link_scout.crawler.verifier import StatusVerifier
from link_scout.utils import dedupe, normalize_href, page_target

__all__ = ("LinkChecker",)


class LinkChecker:
    """Асинхронная проверка ссылок одной страницы: извлечение, дедупликация, параллельная проверка."""

    def __init__(self, config: CheckerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None
        self.logger = logging.getLogger("LinkScout")

    async def __aenter__(self) -> LinkChecker:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def check(self, url: str) -> CrawlReport:
        if not self.session:
            raise RuntimeError("Session not initialized")
        target = page_target(url)
        self.logger.info("Старт проверки: %s", target.url)
        start = time.monotonic()

        fetcher = Fetcher(self.session, self.config)
        page = await fetcher.fetch_page(target.url)

        rejected = 0
        candidates: List[str] = []
        for link in extract_links(page.content):
            candidate = normalize_href(link.href, target.url, resolve_relative=self.config.resolve_relative)
            if candidate is None:
                rejected += 1
            else:
                candidates.append(candidate)
        link_set = dedupe(candidates, self.config.max_links)
        self.logger.debug(
            "%s: %d hrefs, %d unsupported, %d unique candidates",
            target.url, len(candidates) + rejected, rejected, len(link_set) + link_set.overflow,
        )

        verifier = StatusVerifier(fetcher)
        statuses = await run_batch(verifier.verify, link_set, concurrency=self.config.concurrency)
        report = assemble(
            statuses,
            page_url=target.url,
            skipped_by_cap=link_set.overflow,
            skipped_unsupported=rejected,
        )

        duration = time.monotonic() - start
        self.logger.info(
            "Завершено: %d ссылок за %.2f с (рабочих %d, битых %d)",
            report.total, duration, report.working_count, report.broken_count,
        )
        return report
