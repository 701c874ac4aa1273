import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookquotes.api.routers import (
    create_books_router,
    create_scrape_router,
    create_search_router,
    create_systems_router,
)
from bookquotes.container import Container
from bookquotes.db.engine import init_db

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None, *, init_schema: bool = True) -> FastAPI:
    """Build the FastAPI app from a container's providers."""
    container = container or Container()
    if init_schema:
        init_db(container.db_engine())

    app = FastAPI(title="BookQuotes API", version="0.1.0")
    app.state.container = container

    origins = container.config.CORS_ORIGINS() or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=False,
    )

    app.include_router(create_systems_router())
    app.include_router(create_search_router(container.search_service()))
    app.include_router(create_books_router(container.books_repository(), container.quotes_repository()))
    app.include_router(create_scrape_router(container.scrape_runner(), container.scrape_registry()))
    logger.info("BookQuotes API ready (origins=%s)", origins)
    return app
