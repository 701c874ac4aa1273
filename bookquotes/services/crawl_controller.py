import logging
import time
from typing import Callable, Iterator, List, Optional

from bookquotes.domain import (
    CompleteEvent,
    CrawlEvent,
    CrawlSettings,
    CrawlState,
    ErrorEvent,
    PageResult,
    ProgressEvent,
    ScrapedQuote,
)
from bookquotes.services.quote_extractor import extract_quotes_page
from bookquotes.services.site_urls import quotes_page_url

logger = logging.getLogger(__name__)

QuotesSink = Callable[[List[ScrapedQuote]], None]


class CrawlController:
    """Walks the quotes pages of one work, politely and in page order.

    This class owns the crawl control-flow (page bound tracking, delay,
    cancellation checks, per-page failure policy) and reports it as a stream of
    `CrawlEvent` values. Persisting the quotes is left to the `on_quotes`
    callback supplied by the caller.
    """

    def __init__(
        self,
        *,
        fetcher,
        settings: CrawlSettings,
        extract_page_fn: Callable[[str, int], PageResult] = extract_quotes_page,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        self.fetcher = fetcher
        self.settings = settings
        self.extract_page_fn = extract_page_fn
        self.sleep_fn = sleep_fn

    def _is_stopped(self, stop_event) -> bool:
        return stop_event is not None and getattr(stop_event, "is_set", lambda: False)()

    def _check_aborted(self, state: CrawlState, stop_event) -> bool:
        if self._is_stopped(stop_event):
            state.aborted = True
        return state.aborted

    def _wait(self, stop_event) -> None:
        """Sleep for the inter-request delay; a stop event cuts the wait short."""
        delay = self.settings.delay_seconds
        if stop_event is not None and hasattr(stop_event, "wait"):
            stop_event.wait(delay)
        else:
            self.sleep_fn(delay)

    def fetch_page(self, work_id: str, page: int) -> PageResult:
        html = self.fetcher.fetch(quotes_page_url(work_id, page))
        return self.extract_page_fn(html, page)

    def crawl(self, work_id: str, stop_event=None, on_quotes: Optional[QuotesSink] = None) -> Iterator[CrawlEvent]:
        """Yield progress for a crawl of `work_id`, ending in exactly one terminal event.

        Page 1 failing is fatal. Failures on later pages are reported and
        skipped. The crawl ends with `CompleteEvent` when the page bound or the
        page cap is reached, a page comes back empty, or `stop_event` is set.
        """
        state = CrawlState(work_id=work_id)
        max_pages = self.settings.max_pages

        try:
            first = self.fetch_page(work_id, 1)
            # Released only once page 1 answered, so a dead first page yields a lone error.
            yield ProgressEvent(page=1, total_pages=1, quotes_found=0, status="Fetching page 1...")

            state.total_pages = min(max_pages, max(1, first.total_pages))
            self._deliver(on_quotes, first.quotes)
            state.quotes_found += len(first.quotes)
            logger.info("Work %s page 1: %d quotes, %d pages", work_id, len(first.quotes), state.total_pages)
            yield ProgressEvent(
                page=1,
                total_pages=state.total_pages,
                quotes_found=state.quotes_found,
                status=f"Fetched page 1 of {state.total_pages} ({state.quotes_found} quotes)",
            )

            page = 2
            while page <= state.total_pages:
                state.current_page = page
                if self._check_aborted(state, stop_event):
                    logger.info("Crawl of %s cancelled before page %d", work_id, page)
                    break
                self._wait(stop_event)
                if self._check_aborted(state, stop_event):
                    logger.info("Crawl of %s cancelled before page %d", work_id, page)
                    break

                yield ProgressEvent(
                    page=page,
                    total_pages=state.total_pages,
                    quotes_found=state.quotes_found,
                    status=f"Fetching page {page} of {state.total_pages}...",
                )
                try:
                    result = self.fetch_page(work_id, page)
                except Exception as e:
                    logger.warning("Page %d of %s failed: %s", page, work_id, e)
                    yield ErrorEvent(message=f"Error on page {page}: {e}")
                    page += 1
                    continue

                if not result.quotes:
                    logger.info("No quotes on page %d of %s; stopping", page, work_id)
                    break

                state.raise_total_pages(result.total_pages, max_pages)
                self._deliver(on_quotes, result.quotes)
                state.quotes_found += len(result.quotes)
                yield ProgressEvent(
                    page=page,
                    total_pages=state.total_pages,
                    quotes_found=state.quotes_found,
                    status=f"Fetched page {page} of {state.total_pages} ({state.quotes_found} quotes)",
                )
                page += 1
        except Exception as e:
            logger.exception("Crawl of %s failed", work_id)
            yield ErrorEvent(message=f"Scraping failed: {e}")
            return

        logger.info("Crawl of %s complete: %d quotes", work_id, state.quotes_found)
        yield CompleteEvent(total_quotes=state.quotes_found)

    @staticmethod
    def _deliver(on_quotes: Optional[QuotesSink], quotes: List[ScrapedQuote]) -> None:
        if on_quotes is not None and quotes:
            on_quotes(list(quotes))
