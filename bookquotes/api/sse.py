"""Server-sent events rendering for crawl progress."""
import json
import logging
import queue
from typing import AsyncIterator, Awaitable, Callable, Optional

from starlette.concurrency import run_in_threadpool

from bookquotes.domain import CompleteEvent, CrawlEvent

logger = logging.getLogger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def format_sse(event: CrawlEvent, extra: Optional[dict] = None) -> str:
    """Format one crawl event as `event: <type>` plus a JSON `data:` line."""
    payload = event.to_payload()
    if extra:
        payload.update(extra)
    return f"event: {event.type}\ndata: {json.dumps(payload, ensure_ascii=False)}\n\n"


async def stream_session(
    session,
    scrape_runner,
    is_disconnected: Callable[[], Awaitable[bool]],
    poll_interval: float = 1.0,
) -> AsyncIterator[str]:
    """Relay a scrape's channel as SSE text, in the order events were produced.

    A client that goes away cancels the scrape; the scrape then finishes on its
    own thread with whatever it collected.
    """
    finished = False
    try:
        while True:
            try:
                event = await run_in_threadpool(session.channel.get, True, poll_interval)
            except queue.Empty:
                if await is_disconnected():
                    logger.info("Client left scrape %s", session.crawl_id)
                    break
                continue
            if event is None:
                finished = True
                break
            extra = {"bookId": session.book_id} if isinstance(event, CompleteEvent) else None
            yield format_sse(event, extra)
    finally:
        if not finished:
            scrape_runner.cancel(session)
