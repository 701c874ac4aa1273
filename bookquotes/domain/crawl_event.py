from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class ProgressEvent:
    type: ClassVar[str] = "progress"

    page: int
    total_pages: int
    quotes_found: int
    status: str

    def to_payload(self) -> dict:
        return {
            "page": self.page,
            "totalPages": self.total_pages,
            "quotesFound": self.quotes_found,
            "status": self.status,
        }


@dataclass(frozen=True)
class CompleteEvent:
    type: ClassVar[str] = "complete"

    total_quotes: int

    def to_payload(self) -> dict:
        return {"totalQuotes": self.total_quotes}


@dataclass(frozen=True)
class ErrorEvent:
    """Either a per-page failure or the terminal failure of a crawl.

    Which one it is follows from the sequence: an error with no later
    `CompleteEvent` is terminal.
    """

    type: ClassVar[str] = "error"

    message: str

    def to_payload(self) -> dict:
        return {"message": self.message}


CrawlEvent = Union[ProgressEvent, CompleteEvent, ErrorEvent]
