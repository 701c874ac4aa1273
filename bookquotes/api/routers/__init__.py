"""API router factory functions."""
from .books import create_books_router
from .scrape import create_scrape_router
from .search import create_search_router
from .systems import create_systems_router

__all__ = [
    "create_books_router",
    "create_scrape_router",
    "create_search_router",
    "create_systems_router",
]
