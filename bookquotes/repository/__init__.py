from .books import BooksRepository
from .quotes import QuotesRepository

__all__ = ["BooksRepository", "QuotesRepository"]
