from typing import List, Optional


class Quote:
    def __init__(self, quote_id: Optional[int], book_id: int, text: str, author: str, likes_count: int = 0, tags: Optional[List[str]] = None, page_number: int = 1):
        self.quote_id = quote_id
        self.book_id = book_id
        self.text = text
        self.author = author
        self.likes_count = likes_count
        self.tags = list(tags or [])
        self.page_number = page_number

    def to_dict(self) -> dict:
        return {
            "id": self.quote_id,
            "book_id": self.book_id,
            "quote_text": self.text,
            "author": self.author,
            "likes_count": self.likes_count,
            "tags": self.tags,
            "page_number": self.page_number,
        }

    def __repr__(self):
        return f"<Quote id={self.quote_id} book_id={self.book_id} page={self.page_number}>"
