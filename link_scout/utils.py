# File: link_scout/utils.py
"""link_scout.utils: URL normalization and deduplication helpers."""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence
from urllib.parse import urljoin, urlparse, urlunparse

from link_scout.crawler.models import InvalidTargetError, LinkSet, PageTarget
from link_scout.logger import logger

__all__: Sequence[str] = (
    "ensure_scheme",
    "page_target",
    "normalize_href",
    "dedupe",
)

_HTTP_SCHEMES = ("http", "https")
_LEADING_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def ensure_scheme(raw: str) -> str:
    """Adds ``https://`` to a page URL typed without a scheme."""
    url = raw.strip()
    if not _LEADING_SCHEME.match(url):
        url = "https://" + url.lstrip("/")
    return url


def _is_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme.lower() in _HTTP_SCHEMES and bool(parsed.hostname)


def page_target(raw: str) -> PageTarget:
    """Builds the PageTarget for a caller-supplied URL or raises InvalidTargetError."""
    url = ensure_scheme(raw)
    try:
        valid = _is_http_url(url)
    except ValueError:
        valid = False
    if not valid:
        raise InvalidTargetError(f"Invalid page URL: {raw!r}")
    return PageTarget(raw=raw, url=url)


def normalize_href(href: str, base_url: str, *, resolve_relative: bool = False) -> Optional[str]:
    """
    Resolves an anchor href against the page URL.

    Absolute http(s) hrefs are returned verbatim, root-relative and
    protocol-relative ones are joined to the page origin. Everything else
    (mailto:, tel:, javascript:, fragments, path-relative hrefs) gives None,
    unless ``resolve_relative`` enables full RFC 3986 resolution for paths.
    """
    try:
        raw = href.strip()
        if not raw or raw.startswith("#"):
            return None

        base = urlparse(base_url)
        if raw.startswith("//"):
            candidate = f"{base.scheme}:{raw}"
        elif raw.startswith("/"):
            candidate = urlunparse((base.scheme, base.netloc, "", "", "", "")) + raw
        elif urlparse(raw).scheme:
            candidate = raw
        elif resolve_relative:
            candidate = urljoin(base_url, raw)
        else:
            logger.debug("Path-relative href skipped: %s", raw)
            return None

        return candidate if _is_http_url(candidate) else None
    except (ValueError, AttributeError) as exc:
        logger.debug("Malformed href %r: %s", href, exc)
        return None


def dedupe(urls: Iterable[str], max_links: int = 50) -> LinkSet:
    """Removes duplicates keeping first-seen order and caps the result at ``max_links``."""
    kept: dict[str, None] = {}
    dropped: set[str] = set()
    for url in urls:
        if url in kept or url in dropped:
            continue
        if len(kept) < max_links:
            kept[url] = None
        else:
            dropped.add(url)
    if dropped:
        logger.info("Link cap %d reached, %d links not checked", max_links, len(dropped))
    return LinkSet(urls=tuple(kept), overflow=len(dropped))
