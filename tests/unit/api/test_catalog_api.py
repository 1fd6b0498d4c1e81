"""
Unit Tests for the catalog endpoints.

GET /api/categories, GET /api/stats, plus the /api 404 envelope.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

CATEGORIES_ENDPOINT = "/api/categories"
STATS_ENDPOINT = "/api/stats"


class TestCategoriesEndpoint:

    def test_categories(self, client: TestClient) -> None:
        response = client.get(CATEGORIES_ENDPOINT)

        assert response.status_code == 200
        assert response.json() == [
            {"id": "catA", "name": "catA", "count": 2, "displayName": "Category A"},
            {"id": "catB", "name": "catB", "count": 1, "displayName": "catB"},
        ]


class TestStatsEndpoint:

    def test_stats(self, client: TestClient) -> None:
        response = client.get(STATS_ENDPOINT)

        assert response.status_code == 200
        data = response.json()
        assert data["totalTerms"] == 3
        assert data["categories"] == 2
        assert data["byDifficulty"] == {"beginner": 1, "intermediate": 2, "advanced": 0}
        assert data["byCategory"] == {"catA": 2, "catB": 1}
        assert "lastUpdated" in data


class TestApiNotFound:

    def test_unknown_api_route(self, client: TestClient) -> None:
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "API endpoint not found"}

    def test_unknown_non_api_route_keeps_default_body(self, client: TestClient) -> None:
        response = client.get("/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}


class TestCatalogNotLoaded:

    def test_api_returns_503_without_catalog(self) -> None:
        from src.main import app

        app.state.catalog = None
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get(CATEGORIES_ENDPOINT)

        assert response.status_code == 503
