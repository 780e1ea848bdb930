"""Tests for the topics REST API."""

import pytest
from fastapi.testclient import TestClient

from sql_cheatsheet.api.app import create_app
from sql_cheatsheet.api.dependencies import get_config, get_content_store
from sql_cheatsheet.content import Category, ContentStore, TopicEntry


@pytest.fixture
def client():
    """Create a test client backed by a small store."""
    store = ContentStore([
        TopicEntry(Category.JOINS, "JOIN", "Combines rows from multiple tables.", "SELECT 1;"),
        TopicEntry(Category.JOINS, "LEFT JOIN", "Keeps all left rows.", "SELECT 2;", keywords=("LEFT OUTER JOIN",)),
        TopicEntry(Category.CLAUSES, "WHERE", "Filters rows < 10.", "SELECT * FROM t WHERE a < 10;"),
    ])
    app = create_app()
    app.dependency_overrides[get_content_store] = lambda: store
    return TestClient(app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestCategoriesEndpoints:
    def test_list_categories(self, client):
        response = client.get("/api/v1/categories")

        assert response.status_code == 200
        assert response.json() == [
            {"name": "Clauses", "count": 1},
            {"name": "Joins", "count": 2},
        ]

    def test_list_category_topics(self, client):
        response = client.get("/api/v1/categories/joins/topics")

        assert response.status_code == 200
        assert [topic["title"] for topic in response.json()] == ["JOIN", "LEFT JOIN"]

    def test_known_category_without_topics(self, client):
        response = client.get("/api/v1/categories/DCL/topics")

        assert response.status_code == 200
        assert response.json() == []

    def test_unknown_category(self, client):
        response = client.get("/api/v1/categories/triggers/topics")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "category_not_found"
        assert "Joins" in body["valid_categories"]


class TestTopicEndpoints:
    def test_get_topic(self, client):
        response = client.get("/api/v1/topics/join")

        assert response.status_code == 200
        assert response.json() == {
            "category": "Joins",
            "title": "JOIN",
            "description": "Combines rows from multiple tables.",
            "example": "SELECT 1;",
            "keywords": [],
        }

    def test_get_topic_by_alias(self, client):
        response = client.get("/api/v1/topics/left outer join")

        assert response.status_code == 200
        assert response.json()["title"] == "LEFT JOIN"

    def test_topic_not_found(self, client):
        response = client.get("/api/v1/topics/FOOBAR")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "topic_not_found"
        assert body["keyword"] == "FOOBAR"

    def test_render_markdown_by_default(self, client):
        response = client.get("/api/v1/topics/where/render")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.startswith("## WHERE")

    def test_render_html(self, client):
        response = client.get("/api/v1/topics/where/render", params={"format": "html"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Filters rows &lt; 10." in response.text

    def test_render_unsupported_format(self, client):
        response = client.get("/api/v1/topics/where/render", params={"format": "pdf"})

        assert response.status_code == 400
        assert response.json()["error"] == "unsupported_format"


def test_default_store_dependency_serves_builtin_topics(monkeypatch):
    monkeypatch.delenv("CHEATSHEET_CONTENT_DIR", raising=False)
    get_config.cache_clear()
    get_content_store.cache_clear()
    client = TestClient(create_app())

    response = client.get("/api/v1/topics/select")

    assert response.status_code == 200
    assert response.json()["category"] == "DQL"


def test_builtin_min_max_topic_reachable_by_title(monkeypatch):
    monkeypatch.delenv("CHEATSHEET_CONTENT_DIR", raising=False)
    get_config.cache_clear()
    get_content_store.cache_clear()
    client = TestClient(create_app())

    response = client.get("/api/v1/topics/min and max")

    assert response.status_code == 200
    assert response.json()["keywords"] == ["MIN", "MAX"]
