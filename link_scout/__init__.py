"""
LinkScout package initializer.
Defines package version and exposes the checker API.
The CLI entry point lives in :mod:`link_scout.cli`.
"""
__version__ = "0.1.0"

from link_scout.aggregator import CrawlReport, assemble
from link_scout.config import CheckerConfig, load_config
from link_scout.crawler.crawler import LinkChecker
from link_scout.crawler.models import LinkStatus, PageFetchError

__all__ = [
    "__version__",
    "CheckerConfig",
    "CrawlReport",
    "LinkChecker",
    "LinkStatus",
    "PageFetchError",
    "assemble",
    "load_config",
]
