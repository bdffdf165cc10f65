# link_scout/crawler/verifier.py
"""
Status verification of a single candidate URL.
"""
from __future__ import annotations

import asyncio
import logging

from aiohttp import ClientError
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.models import LinkStatus


class StatusVerifier:
    """Checks one URL per call and classifies the result; never raises on network errors."""

    def __init__(self, fetcher: Fetcher) -> None:
        self.fetcher = fetcher
        self.logger = logging.getLogger("LinkScout")

    async def verify(self, url: str) -> LinkStatus:
        try:
            status, reason = await self.fetcher.fetch_status(url)
        except asyncio.TimeoutError:
            self.logger.warning("Failed %s: timed out", url)
            return LinkStatus.failed(url, "timeout")
        except ClientError as exc:
            self.logger.warning("Failed %s: %s", url, exc)
            return LinkStatus.failed(url, str(exc) or type(exc).__name__)
        return LinkStatus.from_response(url, status, reason)
