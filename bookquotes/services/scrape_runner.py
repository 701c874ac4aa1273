import logging
import queue
import threading
from dataclasses import dataclass
from typing import List, Optional

from bookquotes.domain import CompleteEvent, ErrorEvent, ProgressEvent, ScrapedQuote
from bookquotes.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScrapeSession:
    """What a transport needs to follow one running scrape."""

    crawl_id: str
    book_id: int
    work_id: str
    stop_event: threading.Event
    channel: "queue.Queue"
    """FIFO of `CrawlEvent` values, closed by a `None` sentinel"""


class ScrapeRunner:
    """Runs a crawl on its own thread and persists what it finds.

    Every event produced by the crawl is pushed, in order, onto the session's
    channel. Quotes are written per page, before the matching progress event,
    so they are all stored by the time `Complete` is delivered.
    """

    def __init__(self, *, crawl_controller, books_repo, quotes_repo, scrape_registry, thread_factory=threading.Thread):
        self.crawl_controller = crawl_controller
        self.books_repo = books_repo
        self.quotes_repo = quotes_repo
        self.scrape_registry = scrape_registry
        self.thread_factory = thread_factory

    def start(self, work_id: str, title: Optional[str], author: Optional[str], cover_image_url: Optional[str] = None) -> ScrapeSession:
        work_id = (work_id or "").strip()
        title = (title or "").strip()
        author = (author or "").strip()
        if not work_id:
            raise InvalidInputError("Work id is required")
        if not title or not author:
            raise InvalidInputError("Title and author are required")

        book = self.books_repo.upsert_for_scrape(work_id, title, author, cover_image_url)
        handle = self.scrape_registry.start(work_id=work_id, book_id=book.book_id)
        session = ScrapeSession(
            crawl_id=handle.crawl_id,
            book_id=book.book_id,
            work_id=work_id,
            stop_event=handle.stop_event,
            channel=queue.Queue(),
        )
        logger.info("Starting scrape %s for work %s (book %s)", session.crawl_id, work_id, book.book_id)
        thread = self.thread_factory(target=self.run, args=(session,), daemon=True)
        thread.start()
        return session

    def cancel(self, session: ScrapeSession) -> None:
        if not session.stop_event.is_set():
            logger.info("Cancelling scrape %s", session.crawl_id)
        self.scrape_registry.cancel(session.crawl_id)
        session.stop_event.set()

    def run(self, session: ScrapeSession) -> None:
        """Drive the crawl to its terminal event. Always closes the channel."""
        def store(quotes: List[ScrapedQuote]) -> None:
            self.quotes_repo.insert_quotes_batch(session.book_id, quotes)

        last_error: Optional[str] = None
        completed = False
        try:
            for event in self.crawl_controller.crawl(session.work_id, stop_event=session.stop_event, on_quotes=store):
                if isinstance(event, ProgressEvent):
                    self.scrape_registry.update(
                        session.crawl_id,
                        page=event.page,
                        total_pages=event.total_pages,
                        quotes_found=event.quotes_found,
                    )
                elif isinstance(event, CompleteEvent):
                    self.books_repo.set_total_quotes(session.book_id, event.total_quotes)
                    self.scrape_registry.update(session.crawl_id, quotes_found=event.total_quotes)
                    completed = True
                elif isinstance(event, ErrorEvent):
                    last_error = event.message
                session.channel.put(event)
        except Exception as e:
            logger.exception("Scrape %s failed", session.crawl_id)
            last_error = f"Scraping failed: {e}"
            completed = False
            session.channel.put(ErrorEvent(message=last_error))
        finally:
            if completed:
                self.scrape_registry.finish(session.crawl_id, status="finished")
            else:
                self.scrape_registry.finish(session.crawl_id, status="failed", error=last_error)
            session.channel.put(None)
