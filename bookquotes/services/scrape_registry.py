"""In-memory bookkeeping for running and recently finished scrapes."""
from __future__ import annotations

import threading
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, NamedTuple, Optional


class ScrapeHandle(NamedTuple):
    crawl_id: str
    stop_event: threading.Event


@dataclass
class ScrapeRecord:
    id: str
    work_id: str
    book_id: Optional[int]
    started_at: datetime
    stop_event: threading.Event = field(default_factory=threading.Event, repr=False)
    status: str = "running"
    finished_at: Optional[datetime] = None
    page: int = 0
    total_pages: int = 1
    quotes_found: int = 0
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "work_id": self.work_id,
            "book_id": self.book_id,
            "status": self.status,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
            "page": self.page,
            "total_pages": self.total_pages,
            "quotes_found": self.quotes_found,
            "error": self.error,
        }


class InMemoryScrapeRegistry:
    """Tracks scrapes of this process by `crawl_id`.

    Each record owns the stop event of its scrape, so cancelling one scrape
    never touches another. Finished records are kept for inspection, oldest
    dropped first once more than `max_completed_records` have piled up.
    """

    def __init__(self, *, max_completed_records: int = 1000):
        if max_completed_records < 0:
            raise ValueError("max_completed_records must be >= 0")
        self._lock = threading.Lock()
        self._scrapes: Dict[str, ScrapeRecord] = {}
        self._finished = deque()
        self._max_finished = max_completed_records

    def start(self, work_id: str, book_id: Optional[int] = None) -> ScrapeHandle:
        rec = ScrapeRecord(id=str(uuid.uuid4()), work_id=work_id, book_id=book_id, started_at=datetime.utcnow())
        with self._lock:
            self._scrapes[rec.id] = rec
        return ScrapeHandle(crawl_id=rec.id, stop_event=rec.stop_event)

    def update(self, crawl_id: str, *, page: Optional[int] = None, total_pages: Optional[int] = None, quotes_found: Optional[int] = None) -> bool:
        with self._lock:
            rec = self._scrapes.get(crawl_id)
            if rec is None:
                return False
            if page is not None:
                rec.page = page
            if total_pages is not None:
                rec.total_pages = total_pages
            if quotes_found is not None:
                rec.quotes_found = quotes_found
            return True

    def finish(self, crawl_id: str, *, status: str = "finished", error: Optional[str] = None) -> bool:
        with self._lock:
            rec = self._scrapes.get(crawl_id)
            if rec is None or rec.finished_at is not None:
                return False
            # A cancelled scrape still runs to its Complete event; it stays "cancelled".
            if rec.status != "cancelled":
                rec.status = status
            rec.finished_at = datetime.utcnow()
            if error:
                rec.error = error
            self._finished.append(crawl_id)
            while len(self._finished) > self._max_finished:
                self._scrapes.pop(self._finished.popleft(), None)
            return True

    def cancel(self, crawl_id: str) -> bool:
        """Set the stop event of a running scrape. False if unknown or already stopping."""
        with self._lock:
            rec = self._scrapes.get(crawl_id)
            if rec is None or rec.status != "running":
                return False
            rec.status = "cancelled"
            rec.stop_event.set()
            return True

    def get(self, crawl_id: str) -> Optional[dict]:
        with self._lock:
            rec = self._scrapes.get(crawl_id)
            return rec.to_dict() if rec else None

    def list_active(self) -> List[dict]:
        with self._lock:
            return [r.to_dict() for r in self._scrapes.values() if r.status == "running"]
