import logging
from typing import Callable, List, Optional

from bookquotes.domain import CrawlSettings, SearchHit
from bookquotes.exceptions import InvalidInputError, TransportError, UpstreamError
from bookquotes.services.quote_extractor import extract_search_hits
from bookquotes.services.site_urls import search_url

logger = logging.getLogger(__name__)


class SearchService:
    """One-page catalog lookup; returns at most `settings.search_limit` hits."""

    def __init__(self, fetcher, settings: CrawlSettings, extract_hits_fn: Optional[Callable] = None):
        self.fetcher = fetcher
        self.settings = settings
        self.extract_hits_fn = extract_hits_fn or extract_search_hits

    def search(self, query: str) -> List[SearchHit]:
        query = (query or "").strip()
        if not query:
            raise InvalidInputError("Search query is required")

        url = search_url(query)
        try:
            html = self.fetcher.fetch(url)
        except TransportError as e:
            logger.warning("Search for %r failed: %s", query, e)
            raise UpstreamError(f"Failed to search for books: {e}", transport_error=e) from e

        hits = self.extract_hits_fn(html, limit=self.settings.search_limit)
        logger.info("Search for %r returned %d hits", query, len(hits))
        return hits
