from unittest.mock import Mock

from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from bookquotes.api.app import create_app
from bookquotes.container import Container
from bookquotes.domain import SearchHit


def _app(tmp_path):
    container = Container()
    engine = create_engine(f"sqlite:///{tmp_path / 'quotes.db'}", future=True, connect_args={"check_same_thread": False})
    container.db_engine.override(providers.Object(engine))
    return container, create_app(container)


def test_health_and_empty_library(tmp_path):
    container, app = _app(tmp_path)
    client = TestClient(app)

    assert client.get("/api/health").json() == {"status": "ok"}
    assert client.get("/api/books").json() == []
    assert client.get("/api/books/1").status_code == 404


def test_search_wired_through_container(tmp_path):
    container = Container()
    engine = create_engine(f"sqlite:///{tmp_path / 'quotes.db'}", future=True, connect_args={"check_same_thread": False})
    container.db_engine.override(providers.Object(engine))
    service = Mock(search=Mock(return_value=[SearchHit(title="Dune", author="Frank Herbert", cover_image_url="", work_id="3634639")]))
    container.search_service.override(providers.Object(service))
    client = TestClient(create_app(container))

    resp = client.get("/api/search", params={"q": "dune"})

    assert resp.status_code == 200
    assert resp.json() == [{"title": "Dune", "author": "Frank Herbert", "coverImageUrl": "", "workId": "3634639"}]


def test_books_persisted_through_repository_are_listed(tmp_path):
    container, app = _app(tmp_path)
    client = TestClient(app)
    book = container.books_repository().upsert_for_scrape("42", "T", "A")

    resp = client.get("/api/books")

    assert [b["id"] for b in resp.json()] == [book.book_id]
    assert client.delete(f"/api/books/{book.book_id}").json() == {"success": True}
    assert client.get("/api/books").json() == []


def test_environment_is_not_exposed_over_http(tmp_path):
    container, app = _app(tmp_path)
    client = TestClient(app)

    assert client.get("/api/config").status_code == 404


def test_cors_preflight_allowed(tmp_path):
    container, app = _app(tmp_path)
    client = TestClient(app)

    resp = client.options(
        "/api/books",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
    )

    assert resp.status_code == 200
    assert "access-control-allow-origin" in resp.headers
