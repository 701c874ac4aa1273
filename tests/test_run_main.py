"""
Test for run.py main() with an injected container.
"""
from unittest.mock import Mock, patch

from dependency_injector import providers
from sqlalchemy import create_engine

from run import main
from bookquotes.container import Container


def _container(tmp_path):
    container = Container()
    engine = create_engine(f"sqlite:///{tmp_path / 'quotes.db'}", future=True)
    container.db_engine.override(providers.Object(engine))
    return container


def test_container_creates_dependencies(tmp_path):
    """Test that the container creates all required dependencies."""
    container = _container(tmp_path)

    assert container.books_repository() is not None
    assert container.quotes_repository() is not None
    assert container.books_repository() is container.books_repository()


def test_container_creates_services(tmp_path):
    """Test that the container creates service instances."""
    container = _container(tmp_path)
    container.config.SCRAPE_DELAY_MS.from_value(250)

    assert container.crawl_settings().delay_seconds == 0.25
    assert container.http_service().timeout == 15.0
    assert container.search_service() is not None
    runner = container.scrape_runner()
    assert runner.scrape_registry is container.scrape_registry()
    assert runner.crawl_controller.settings is container.crawl_settings()


def test_main_accepts_injected_container(tmp_path):
    """Test that main() can accept an injected container for testing."""
    container = _container(tmp_path)
    container.config.SERVER_PORT.from_value(4010)
    container.search_service.override(Mock())

    with patch('run.uvicorn.run') as mock_uvicorn:
        main(container=container)

        assert mock_uvicorn.called
        assert mock_uvicorn.call_args.kwargs["port"] == 4010
