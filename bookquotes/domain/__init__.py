"""Domain objects for BookQuotes - explicit re-exports to satisfy linters."""
from .search_hit import SearchHit as SearchHit
from .scraped_quote import ScrapedQuote as ScrapedQuote
from .page_result import PageResult as PageResult
from .crawl_state import CrawlState as CrawlState
from .crawl_settings import CrawlSettings as CrawlSettings
from .crawl_event import (
    CrawlEvent as CrawlEvent,
    ProgressEvent as ProgressEvent,
    CompleteEvent as CompleteEvent,
    ErrorEvent as ErrorEvent,
)
from .book import Book as Book
from .quote import Quote as Quote

__all__ = [
    "SearchHit",
    "ScrapedQuote",
    "PageResult",
    "CrawlState",
    "CrawlSettings",
    "CrawlEvent",
    "ProgressEvent",
    "CompleteEvent",
    "ErrorEvent",
    "Book",
    "Quote",
]
