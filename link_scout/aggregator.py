# File: link_scout/aggregator.py
"""link_scout.aggregator: сборка итогового отчёта проверки ссылок."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

from link_scout.crawler.models import LinkStatus


@dataclass(frozen=True, slots=True)
class CrawlReport:
    """Результат одной проверки: счётчики и разбиение на рабочие и битые ссылки."""

    page_url: str
    total: int
    working_count: int
    broken_count: int
    links: Tuple[LinkStatus, ...]
    broken: Tuple[LinkStatus, ...]
    working: Tuple[LinkStatus, ...]
    skipped_by_cap: int = 0
    skipped_unsupported: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page_url": self.page_url,
            "total": self.total,
            "working_count": self.working_count,
            "broken_count": self.broken_count,
            "skipped_by_cap": self.skipped_by_cap,
            "skipped_unsupported": self.skipped_unsupported,
            "broken": [s.to_dict() for s in self.broken],
            "working": [s.to_dict() for s in self.working],
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление CrawlReport."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def assemble(
    statuses: Iterable[LinkStatus],
    *,
    page_url: str = "",
    skipped_by_cap: int = 0,
    skipped_unsupported: int = 0,
) -> CrawlReport:
    """Разбивает статусы на broken/working с сохранением порядка и считает итоги."""
    links = tuple(statuses)
    broken = tuple(s for s in links if s.broken)
    working = tuple(s for s in links if not s.broken)
    return CrawlReport(
        page_url=page_url,
        total=len(links),
        working_count=len(working),
        broken_count=len(broken),
        links=links,
        broken=broken,
        working=working,
        skipped_by_cap=skipped_by_cap,
        skipped_unsupported=skipped_unsupported,
    )
