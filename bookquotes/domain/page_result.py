"""Result of extracting one quotes page."""
from typing import List, NamedTuple

from .scraped_quote import ScrapedQuote


class PageResult(NamedTuple):
    quotes: List[ScrapedQuote]
    """Quotes found on the page, in document order"""

    total_pages: int
    """Best estimate of how many pages exist, as seen from this page"""
