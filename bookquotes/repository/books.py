from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from bookquotes.db.models import Book as DBBook, Quote as DBQuote
from bookquotes.domain import Book


class BooksRepository:
    """Repository for Book database operations.

    Requires an explicit `session_factory` (callable returning a `Session`).
    """
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def get_session(self) -> Session:
        return self.session_factory()

    def _to_domain(self, row: DBBook) -> Book:
        return Book(
            book_id=row.book_id,
            work_id=row.work_id,
            title=row.title,
            author=row.author,
            cover_image_url=row.cover_image_url,
            total_quotes=row.total_quotes or 0,
            scraped_at=row.scraped_at,
        )

    def upsert_for_scrape(self, work_id: str, title: str, author: str, cover_image_url: Optional[str] = None) -> Book:
        """Create the book or refresh its metadata, dropping quotes from any earlier scrape."""
        now = datetime.now(timezone.utc)
        with self.get_session() as session:
            row = session.execute(select(DBBook).where(DBBook.work_id == work_id)).scalars().first()
            if row:
                row.title = title
                row.author = author
                row.cover_image_url = cover_image_url or None
                row.scraped_at = now
                row.total_quotes = 0
                session.execute(delete(DBQuote).where(DBQuote.book_id == row.book_id))
            else:
                row = DBBook(
                    work_id=work_id,
                    title=title,
                    author=author,
                    cover_image_url=cover_image_url or None,
                    total_quotes=0,
                    scraped_at=now,
                )
                session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_domain(row)

    def set_total_quotes(self, book_id: int, total_quotes: int) -> bool:
        with self.get_session() as session:
            row = session.get(DBBook, book_id)
            if not row:
                return False
            row.total_quotes = total_quotes
            session.commit()
            return True

    def list_books(self) -> List[Book]:
        with self.get_session() as session:
            q = select(DBBook).order_by(DBBook.scraped_at.desc(), DBBook.book_id.desc())
            return [self._to_domain(r) for r in session.execute(q).scalars().all()]

    def get_book(self, book_id: int) -> Optional[Book]:
        with self.get_session() as session:
            row = session.get(DBBook, book_id)
            return self._to_domain(row) if row else None

    def delete_book(self, book_id: int) -> bool:
        """Delete a book together with its quotes. Returns False when it did not exist."""
        with self.get_session() as session:
            row = session.get(DBBook, book_id)
            if not row:
                return False
            session.execute(delete(DBQuote).where(DBQuote.book_id == book_id))
            session.delete(row)
            session.commit()
            return True
