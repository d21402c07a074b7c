"""Tests for the JSON query API.

The engine configuration dependency is overridden per test so every request
reads the temporary content directory built by the ``content_dir`` fixture.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from flatdocs.config import get_config
from flatdocs.main import app

client = TestClient(app, raise_server_exceptions=False)


@pytest.fixture(autouse=True)
def use_test_config(config):
    """Point the API at the test content and clear the rate-limit counters."""
    app.state.limiter._storage.reset()
    app.dependency_overrides[get_config] = lambda: config
    yield
    app.dependency_overrides.clear()


class TestHealth:
    def test_root(self):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "content_dir_exists": True}


class TestPagesEndpoint:
    def test_tree(self):
        resp = client.get("/pages")
        assert resp.status_code == 200
        data = resp.json()
        assert data[0]["is_index"] is True
        assert data[0]["files"][0]["title"] == "Example Page"
        assert data[1]["slug"] == "sub"
        assert data[1]["files"][0]["title"] == "Example Sub Page"

    def test_active_query_parameter(self):
        data = client.get("/pages", params={"active": "/example-page"}).json()
        assert data[0]["files"][0]["active"] is True
        assert data[1]["files"][0]["active"] is False

    def test_single_page(self):
        resp = client.get("/pages/sub/example-sub-page")
        assert resp.status_code == 200
        data = resp.json()
        assert data["slug"] == "sub-example-sub-page"
        assert data["body"].startswith("Some content")

    def test_missing_page_is_404(self):
        resp = client.get("/pages/nonexistent-page")
        assert resp.status_code == 404

    def test_io_error_is_500(self):
        with patch("flatdocs.routers.pages.get_pages", side_effect=PermissionError("denied")):
            resp = client.get("/pages")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "An unexpected error occurred."}


class TestSearchEndpoint:
    def test_results(self):
        resp = client.get("/search", params={"q": "example"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["query"] == "example"
        assert data["total"] == 2
        assert {r["slug"] for r in data["results"]} == {"example-page", "sub-example-sub-page"}

    def test_no_results(self):
        data = client.get("/search", params={"q": "asdasdasd"}).json()
        assert data["total"] == 0
        assert data["results"] == []

    def test_missing_query(self):
        assert client.get("/search").json()["results"] == []
