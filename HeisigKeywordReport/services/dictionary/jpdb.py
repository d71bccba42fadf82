"""jpdb.io kanji pages.

The keyword sits in a ``.subsection`` element directly after a
``.subsection-label`` reading "Keyword".
"""
from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup

from .cache import ResponseCache
from .fetcher import RateLimitedFetcher

logger = logging.getLogger(__name__)

KEYWORD_SELECTOR = '.subsection-label:-soup-contains("Keyword") + .subsection'


def extract_keyword(markup: str, kanji: str = "") -> str:
    """Return the trimmed keyword text from a jpdb kanji page, or "" if absent."""
    soup = BeautifulSoup(markup, "html.parser")
    node = soup.select_one(KEYWORD_SELECTOR)
    if node is None:
        logger.debug("No keyword found on page for %s", kanji or "<unknown>")
        return ""
    return node.get_text().strip()


class JpdbClient:
    """Looks up the jpdb keyword for a kanji, going through the cache when one is given."""

    def __init__(
        self,
        fetcher: RateLimitedFetcher,
        cache: Optional[ResponseCache] = None,
        base_url: str = "https://jpdb.io/kanji/",
    ) -> None:
        self.fetcher = fetcher
        self.cache = cache
        self.base_url = base_url

    def kanji_url(self, kanji: str) -> str:
        return f"{self.base_url}{kanji}"

    def fetch_page(self, kanji: str) -> str:
        url = self.kanji_url(kanji)
        if self.cache is None:
            return self.fetcher.fetch(url)
        return self.cache.get_or_fetch(url, self.fetcher.fetch)

    def lookup_keyword(self, kanji: str) -> str:
        return extract_keyword(self.fetch_page(kanji), kanji)
