from dataclasses import dataclass


@dataclass
class CrawlState:
    """Mutable bookkeeping for a single crawl invocation.

    Never shared between crawls and never persisted.
    """

    work_id: str
    current_page: int = 1
    total_pages: int = 1
    quotes_found: int = 0
    aborted: bool = False

    def raise_total_pages(self, observed: int, max_pages: int) -> int:
        """Fold a newly observed page count into the running bound.

        The bound only grows, and never past `max_pages`.
        """
        self.total_pages = min(max_pages, max(self.total_pages, observed))
        return self.total_pages
