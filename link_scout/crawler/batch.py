# link_scout/crawler/batch.py
"""
Concurrent verification of a LinkSet.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Iterable, List, Optional

from link_scout.crawler.models import LinkStatus

Verify = Callable[[str], Awaitable[LinkStatus]]

logger = logging.getLogger("LinkScout")


async def run_batch(
    verify: Verify,
    urls: Iterable[str],
    *,
    concurrency: Optional[int] = None,
) -> List[LinkStatus]:
    """
    Verify all *urls* concurrently and return statuses in input order.

    Returns only after every check has finished. An exception escaping one
    check becomes a failed LinkStatus for that URL; the other checks keep
    running. *concurrency* limits checks in flight (``None`` = all at once).
    """
    url_list = list(urls)
    if not url_list:
        return []

    semaphore = asyncio.Semaphore(concurrency) if concurrency else None

    async def _check(url: str) -> LinkStatus:
        if semaphore is None:
            return await verify(url)
        async with semaphore:
            return await verify(url)

    outcomes = await asyncio.gather(*(_check(u) for u in url_list), return_exceptions=True)

    statuses: List[LinkStatus] = []
    for url, outcome in zip(url_list, outcomes):
        if isinstance(outcome, BaseException):
            if isinstance(outcome, (KeyboardInterrupt, SystemExit)):
                raise outcome
            logger.warning("Check of %s crashed: %r", url, outcome)
            statuses.append(LinkStatus.failed(url, repr(outcome)))
        else:
            statuses.append(outcome)
    return statuses
