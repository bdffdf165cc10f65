# link_scout/crawler/link_extractor.py
"""
Anchor extraction for LinkScout.
"""
from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup, SoupStrainer
from bs4.element import Tag
from link_scout.crawler.models import RawLink

# Parse only <a href=...> tags; html.parser lower-cases tag and attribute names.
LINK_STRAINER = SoupStrainer("a", href=True)


def extract_links(html: str) -> Iterator[RawLink]:
    """
    Yield every anchor href of *html* in document order.

    Duplicates are yielded as often as they occur. Broken markup never
    raises: anchors the parser cannot make sense of are skipped. Each call
    re-parses the document, so the result can be restarted freely.
    """
    soup = BeautifulSoup(html, "html.parser", parse_only=LINK_STRAINER)
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if not isinstance(href, str):
            continue
        text = " ".join(tag.get_text(" ", strip=True).split())
        yield RawLink(href=href, text=text)
