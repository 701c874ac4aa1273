import logging
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookquotes.db.models import Quote as DBQuote
from bookquotes.domain import Quote, ScrapedQuote

logger = logging.getLogger(__name__)


class QuotesRepository:
    """Repository for Quote database operations.

    Requires an explicit `session_factory` (callable returning a `Session`).
    """
    def __init__(self, session_factory):
        self.session_factory = session_factory

    @staticmethod
    def _sanitize_text(val: Optional[str]) -> Optional[str]:
        """Remove NUL (\x00) characters, which some databases refuse in text columns."""
        if isinstance(val, str):
            return val.replace("\x00", "")
        return val

    def get_session(self) -> Session:
        return self.session_factory()

    def _to_domain(self, row: DBQuote) -> Quote:
        return Quote(
            quote_id=row.quote_id,
            book_id=row.book_id,
            text=row.quote_text,
            author=row.author,
            likes_count=row.likes_count or 0,
            tags=list(row.tags or []),
            page_number=row.page_number,
        )

    def insert_quotes_batch(self, book_id: int, quotes: Iterable[ScrapedQuote]) -> int:
        """Insert scraped quotes for `book_id` in one transaction. Returns the number inserted."""
        rows = [
            DBQuote(
                book_id=book_id,
                quote_text=self._sanitize_text(q.text),
                author=self._sanitize_text(q.author),
                likes_count=q.likes_count,
                tags=list(q.tags),
                page_number=q.page_number,
            )
            for q in quotes
        ]
        if not rows:
            return 0
        with self.get_session() as session:
            session.add_all(rows)
            session.commit()
        logger.debug("Inserted %d quotes for book %s", len(rows), book_id)
        return len(rows)

    def list_quotes(self, book_id: int, *, sort: Optional[str] = None, search: Optional[str] = None) -> List[Quote]:
        """Quotes for a book, by page order unless `sort == "likes"`.

        `search` is a case-insensitive substring filter on the quote text.
        """
        q = select(DBQuote).where(DBQuote.book_id == book_id)
        if search and search.strip():
            q = q.where(DBQuote.quote_text.ilike(f"%{search.strip()}%"))
        if sort == "likes":
            q = q.order_by(DBQuote.likes_count.desc(), DBQuote.quote_id.asc())
        else:
            q = q.order_by(DBQuote.page_number.asc(), DBQuote.quote_id.asc())
        with self.get_session() as session:
            return [self._to_domain(r) for r in session.execute(q).scalars().all()]

