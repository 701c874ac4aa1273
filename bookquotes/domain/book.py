from datetime import datetime
from typing import Optional


class Book:
    def __init__(self, book_id: Optional[int], work_id: str, title: str, author: str, cover_image_url: Optional[str] = None, total_quotes: int = 0, scraped_at: Optional[datetime] = None):
        self.book_id = book_id
        self.work_id = work_id
        self.title = title
        self.author = author
        self.cover_image_url = cover_image_url
        self.total_quotes = total_quotes
        self.scraped_at = scraped_at

    def to_dict(self) -> dict:
        return {
            "id": self.book_id,
            "goodreads_work_id": self.work_id,
            "title": self.title,
            "author": self.author,
            "cover_image_url": self.cover_image_url,
            "total_quotes": self.total_quotes,
            "scraped_at": self.scraped_at.isoformat() if self.scraped_at else None,
        }

    def __repr__(self):
        return f"<Book id={self.book_id} work_id={self.work_id}>"
