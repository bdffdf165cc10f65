# link_scout/crawler/fetcher.py
"""
Fetcher module: the two HTTP capabilities the checker depends on.

* :meth:`Fetcher.fetch_page` – raw HTML of the audited page.
* :meth:`Fetcher.fetch_status` – status code and reason of one link.

Timeouts come from the session (``aiohttp.ClientTimeout``); neither call retries.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Tuple

from aiohttp import ClientError, ClientSession
from link_scout.config import CheckerConfig
from link_scout.crawler.models import PageData, PageFetchError

logger = logging.getLogger("LinkScout")


class Fetcher:
    """Thin wrapper over a shared :class:`aiohttp.ClientSession`."""

    def __init__(self, session: ClientSession, config: CheckerConfig) -> None:
        self.session = session
        self.config = config

    async def fetch_page(self, url: str) -> PageData:
        """
        GET the page and return its body.

        Raises PageFetchError on transport errors or HTTP status >= 400.
        """
        try:
            async with self.session.get(url, allow_redirects=True) as resp:
                if resp.status >= 400:
                    raise PageFetchError(f"{url} returned HTTP {resp.status} {resp.reason or ''}".rstrip())
                text = await resp.text(errors="replace")
                return PageData(url, text)
        except asyncio.TimeoutError as exc:
            raise PageFetchError(f"Timed out fetching {url}") from exc
        except ClientError as exc:
            raise PageFetchError(f"Failed to fetch {url}: {exc}") from exc

    async def fetch_status(self, url: str) -> Tuple[int, str]:
        """
        One request with the configured method; redirects are followed.

        Transport errors (ClientError, asyncio.TimeoutError) propagate.
        """
        async with self.session.request(self.config.check_method, url, allow_redirects=True) as resp:
            logger.debug("%s %s -> %s", self.config.check_method, url, resp.status)
            return resp.status, resp.reason or ""
