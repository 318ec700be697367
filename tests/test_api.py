"""
Tests for the HTTP service.
"""

import pytest
from fastapi.testclient import TestClient

from main import app


client = TestClient(app)

MONTHS = ["Jan", "Feb", "Mar"]


class TestServiceEndpoints:
    """Test informational endpoints."""

    def test_health(self):
        """Health lists the variants."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert set(response.json()["variants"]) == {"bar", "bar_horizontal", "line", "pie"}

    def test_list_variants(self):
        """Every variant is listed with its defaults under public names."""
        response = client.get("/charts")
        body = response.json()

        assert response.status_code == 200
        assert body["total"] == 4
        assert body["variants"]["bar"]["defaults"]["fields"] == []
        assert body["variants"]["bar"]["defaults"]["y_start"] == 0
        assert body["variants"]["line"]["defaults"]["area_fill"] is False
        assert "y_start" not in body["variants"]["pie"]["defaults"]


class TestRenderEndpoint:
    """Test chart rendering over HTTP."""

    def test_render_bar(self):
        """A valid request returns an SVG document."""
        response = client.post("/charts/bar", json={
            "config": {"fields": MONTHS, "key": True},
            "series": [{"title": "Sales 2002", "values": [12.975, 45, 21]}]
        })

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text.startswith('<?xml version="1.0"?>')
        assert "</svg>" in response.text
        assert "X-Execution-Time" in response.headers

    def test_unknown_variant(self):
        """Unknown variants are not found."""
        response = client.post("/charts/scatter", json={
            "config": {"fields": MONTHS},
            "series": [{"values": [1, 2, 3]}]
        })

        assert response.status_code == 404

    def test_missing_fields(self):
        """Configuration errors are client errors."""
        response = client.post("/charts/bar", json={"series": [{"values": [1, 2, 3]}]})

        assert response.status_code == 400
        assert "fields" in response.json()["detail"]

    def test_no_series(self):
        """Rendering without data is a client error."""
        response = client.post("/charts/line", json={"config": {"fields": MONTHS}})

        assert response.status_code == 400
        assert "No data" in response.json()["detail"]

    def test_zero_sum_pie(self):
        """Data errors are client errors."""
        response = client.post("/charts/pie", json={
            "config": {"fields": MONTHS},
            "series": [{"values": [0, 0, 0]}]
        })

        assert response.status_code == 400

    def test_tiny_tick_interval(self):
        """An interval needing sub-pixel ticks is a client error."""
        response = client.post("/charts/bar", json={
            "config": {"fields": MONTHS, "y_marker": 1e-7},
            "series": [{"values": [12.975, 45, 21]}]
        })

        assert response.status_code == 400
        assert "ticks" in response.json()["detail"]

    def test_oversized_integer(self):
        """Integers beyond float range are a client error."""
        response = client.post("/charts/bar", json={
            "config": {"fields": MONTHS},
            "series": [{"values": [10 ** 400, 2, 3]}]
        })

        assert response.status_code == 400

    def test_non_numeric_values(self):
        """Non-numeric cells are rejected."""
        response = client.post("/charts/bar", json={
            "config": {"fields": MONTHS},
            "series": [{"values": ["x", 2, 3]}]
        })

        assert response.status_code == 400


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
