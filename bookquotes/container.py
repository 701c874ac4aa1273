"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests
from sqlalchemy.orm import sessionmaker

from bookquotes import config as env
from bookquotes.db.engine import make_engine
from bookquotes.domain import CrawlSettings
from bookquotes.repository.books import BooksRepository
from bookquotes.repository.quotes import QuotesRepository
from bookquotes.services.crawl_controller import CrawlController
from bookquotes.services.fetcher import HttpServiceFetcher
from bookquotes.services.http_service import HttpService
from bookquotes.services.scrape_registry import InMemoryScrapeRegistry
from bookquotes.services.scrape_runner import ScrapeRunner
from bookquotes.services.search_service import SearchService


# Environment variables used by the container (read via `bookquotes.config` helpers).
#
# DATABASE_URL (str, default: "sqlite:///data/quotes.db")
#   SQLAlchemy URL for the book/quote store. SQLite parent directories are created.
#
# SCRAPE_DELAY_MS (int milliseconds, default: 1500)
#   Politeness delay between quotes page fetches within one scrape.
#
# SERVER_PORT (int, default: 3001)
#   Port used by `run.py` when serving the API.
#
# CORS_ORIGINS (comma separated str, default: "*")
#   Origins allowed to call the API from a browser.
#
# BOOKQUOTES_MAX_COMPLETED_SCRAPES (int, default: 1000)
#   How many finished scrape records the in-memory registry keeps.
#
# The request timeout (15000 ms), the page cap (20) and the search result cap
# (10) are fixed and live in `CrawlSettings`.
ENV = {
    "DATABASE_URL": env.database_url(),
    "SCRAPE_DELAY_MS": env.scrape_delay_ms(),
    "SERVER_PORT": env.server_port(),
    "CORS_ORIGINS": env.cors_origins(),
    "BOOKQUOTES_MAX_COMPLETED_SCRAPES": env.get_int_env("BOOKQUOTES_MAX_COMPLETED_SCRAPES", 1000),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the BookQuotes application."""

    config = providers.Configuration(default=ENV)

    # Database engine - Singleton to reuse connection pool
    db_engine = providers.Singleton(
        make_engine,
        database_url=config.DATABASE_URL,
    )
    session_factory = providers.Factory(
        sessionmaker,
        bind=db_engine,
        future=True,
        expire_on_commit=False,
    )

    books_repository = providers.Singleton(
        BooksRepository,
        session_factory=session_factory,
    )

    quotes_repository = providers.Singleton(
        QuotesRepository,
        session_factory=session_factory,
    )

    crawl_settings = providers.Singleton(
        CrawlSettings,
        delay_ms=config.SCRAPE_DELAY_MS.as_(int),
    )

    http_service = providers.Singleton(
        HttpService,
        http_client=providers.Object(requests.get),
        timeout=crawl_settings.provided.timeout_seconds,
    )

    page_fetcher = providers.Singleton(
        HttpServiceFetcher,
        http_service=http_service,
    )

    search_service = providers.Singleton(
        SearchService,
        fetcher=page_fetcher,
        settings=crawl_settings,
    )

    crawl_controller = providers.Factory(
        CrawlController,
        fetcher=page_fetcher,
        settings=crawl_settings,
    )

    scrape_registry = providers.Singleton(
        InMemoryScrapeRegistry,
        max_completed_records=config.BOOKQUOTES_MAX_COMPLETED_SCRAPES.as_(int),
    )

    scrape_runner = providers.Singleton(
        ScrapeRunner,
        crawl_controller=crawl_controller,
        books_repo=books_repository,
        quotes_repo=quotes_repository,
        scrape_registry=scrape_registry,
    )
