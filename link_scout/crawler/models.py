# link_scout/crawler/models.py
"""
Data models for the LinkScout checker.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

FAILED_STATUS_TEXT = "Failed to check"


class PageFetchError(RuntimeError):
    """The audited page could not be retrieved; fatal for the whole check."""


class InvalidTargetError(PageFetchError, ValueError):
    """The submitted page URL is not a usable http(s) address."""


@dataclass(frozen=True, slots=True)
class PageTarget:
    """Root URL submitted by the caller: raw input and its absolute form."""

    raw: str
    url: str


@dataclass(slots=True)
class PageData:
    """Holds URL and text content of a fetched page."""

    url: str
    content: str


@dataclass(frozen=True, slots=True)
class RawLink:
    """An href exactly as written in the document plus its anchor text."""

    href: str
    text: str = ""


@dataclass(frozen=True, slots=True)
class LinkSet:
    """Deduplicated, capped candidate URLs in first-seen order."""

    urls: Tuple[str, ...] = ()
    overflow: int = 0

    def __iter__(self) -> Iterator[str]:
        return iter(self.urls)

    def __len__(self) -> int:
        return len(self.urls)


@dataclass(frozen=True, slots=True)
class LinkStatus:
    """Outcome of verifying a single candidate URL."""

    url: str
    status: int
    status_text: str
    broken: bool
    error: Optional[str] = None

    @classmethod
    def from_response(cls, url: str, status: int, reason: Optional[str]) -> LinkStatus:
        return cls(url=url, status=status, status_text=reason or "", broken=status >= 400 or status == 0)

    @classmethod
    def failed(cls, url: str, error: Optional[str] = None) -> LinkStatus:
        return cls(url=url, status=0, status_text=FAILED_STATUS_TEXT, broken=True, error=error)

    def to_dict(self) -> dict:
        data = {
            "url": self.url,
            "status": self.status,
            "status_text": self.status_text,
            "broken": self.broken,
        }
        if self.error is not None:
            data["error"] = self.error
        return data
