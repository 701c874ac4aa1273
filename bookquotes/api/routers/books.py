from typing import Optional

from fastapi import APIRouter, HTTPException


def create_books_router(books_repo, quotes_repo):
    router = APIRouter(prefix="/api/books", tags=["Books"])

    @router.get("")
    def list_books():
        try:
            books = books_repo.list_books()
        except Exception:
            raise HTTPException(status_code=500, detail="Failed to fetch books")
        return [b.to_dict() for b in books]

    @router.get("/{book_id}")
    def get_book(book_id: int):
        try:
            book = books_repo.get_book(book_id)
        except Exception:
            raise HTTPException(status_code=500, detail="Failed to fetch book")
        if not book:
            raise HTTPException(status_code=404, detail="Book not found")
        return book.to_dict()

    @router.get("/{book_id}/quotes")
    def list_quotes(book_id: int, sort: Optional[str] = None, search: Optional[str] = None):
        """Quotes of a book; `sort=likes` orders by popularity, `search` filters the text."""
        try:
            quotes = quotes_repo.list_quotes(book_id, sort=sort, search=search)
        except Exception:
            raise HTTPException(status_code=500, detail="Failed to fetch quotes")
        return [q.to_dict() for q in quotes]

    @router.delete("/{book_id}")
    def delete_book(book_id: int):
        try:
            deleted = books_repo.delete_book(book_id)
        except Exception:
            raise HTTPException(status_code=500, detail="Failed to delete book")
        if not deleted:
            raise HTTPException(status_code=404, detail="Book not found")
        return {"success": True}

    return router
