"""
Tests for the FastAPI demo application.
"""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from dailycountchart.app import app
from dailycountchart.renderer import ChartRenderError


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_returns_ok(self, client):
        """Health endpoint should return status ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestIndexPage:
    """Tests for the / page."""

    def test_renders_charts(self, client):
        """Page contains a chart per year."""
        response = client.get("/", params={"count": 100, "seed": 3})

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "daily-count-chart-grid" in response.text
        assert "100 random records" in response.text
        assert "daily-count-chart-heading" in response.text

    def test_no_records(self, client):
        """Zero records shows the empty message."""
        response = client.get("/", params={"count": 0})

        assert response.status_code == 200
        assert "No records." in response.text

    def test_count_out_of_range(self, client):
        """count is validated."""
        assert client.get("/", params={"count": -1}).status_code == 422
        assert client.get("/", params={"count": 10001}).status_code == 422

    @patch("dailycountchart.app.validate_config")
    def test_configuration_error(self, mock_validate, client):
        """Bad configuration gives a 500."""
        mock_validate.side_effect = ValueError("DAILY_COUNT_CHART_HUE must be an integer")

        response = client.get("/")

        assert response.status_code == 500
        assert "Configuration error" in response.json()["detail"]

    @patch("dailycountchart.app.render_charts")
    def test_render_error(self, mock_render, client):
        """Render failures give a 500 naming the year."""
        mock_render.side_effect = ChartRenderError(2024, RuntimeError("boom"))

        response = client.get("/", params={"count": 5, "seed": 1})

        assert response.status_code == 500
        assert "2024" in response.json()["detail"]


class TestYearsEndpoint:
    """Tests for the /api/years endpoint."""

    def test_returns_expected_structure(self, client):
        """Each year has a total and positioned days."""
        response = client.get("/api/years", params={"count": 50, "seed": 11})

        assert response.status_code == 200
        data = response.json()

        years = [entry["year"] for entry in data]
        assert years == sorted(years)
        assert sum(entry["total"] for entry in data) == 50

        for entry in data:
            assert entry["days"][0]["date"].endswith("-01-01")
            assert sum(day["count"] for day in entry["days"]) == entry["total"]
            day = entry["days"][0]
            assert set(day) == {"date", "week_column", "weekday_row", "count", "color"}
            assert 1 <= day["weekday_row"] <= 7

    @patch("dailycountchart.app._sample_start")
    def test_seed_is_reproducible(self, mock_start, client):
        """The same seed and start give the same response."""
        mock_start.return_value = datetime(2024, 3, 1, tzinfo=timezone.utc)

        first = client.get("/api/years", params={"count": 30, "seed": 5}).json()
        second = client.get("/api/years", params={"count": 30, "seed": 5}).json()

        assert first == second

    def test_empty(self, client):
        """Zero records gives an empty list."""
        response = client.get("/api/years", params={"count": 0})
        assert response.json() == []

    @patch("dailycountchart.app._sample_start")
    def test_uses_environment_hue(self, mock_start, client):
        """Colors follow the configured hue."""
        mock_start.return_value = datetime(2024, 3, 1, tzinfo=timezone.utc)

        with patch("dailycountchart.config.CHART_HUE", "210"):
            data = client.get("/api/years", params={"count": 20, "seed": 2}).json()

        colors = {day["color"] for entry in data for day in entry["days"] if day["count"]}
        assert colors
        assert all(color.startswith("hsl(210, ") for color in colors)
