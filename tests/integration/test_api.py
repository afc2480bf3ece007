"""Integration tests for the API endpoints."""

import pytest
from fastapi.testclient import TestClient

from record_search.main import app
from record_search.presets import search_engines


class TestAPI:
    """Integration tests for API endpoints."""
    
    @pytest.fixture
    def client(self):
        """Create a test client with clean preset engines."""
        for engine in search_engines.values():
            engine.clear_cache()
            engine.clear_history()
        return TestClient(app)
    
    @pytest.fixture
    def contracts(self):
        """Sample contract records."""
        return [
            {"id": "k-1", "contractTitle": "Supply of laptops", "fileName": "laptops.pdf"},
            {"id": "k-2", "contractTitle": "Office furniture", "fileName": "furniture.docx"},
            {"id": "k-3", "contractTitle": "Laptop repair services", "fileName": "repair.pdf"},
        ]
    
    def test_root_endpoint(self, client):
        """Test the root endpoint."""
        response = client.get("/")
        assert response.status_code == 200
        
        data = response.json()
        assert data["name"] == "Record Search"
        assert set(data["presets"]) == {"tenders", "contracts", "competitors"}

    def test_unexpected_error_returns_error_response(self, contracts, monkeypatch):
        """Test that unhandled failures go through the global handler."""
        def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(search_engines["contracts"], "get_cache_stats", explode)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/api/v1/cache/contracts/stats")
        assert response.status_code == 500
        assert response.json()["error"] == "Internal Server Error"
    
    def test_instant_search(self, client, contracts):
        """Test ranking posted records."""
        response = client.post(
            "/api/v1/search/contracts",
            json={"query": "laptop", "items": contracts}
        )
        assert response.status_code == 200
        
        data = response.json()
        assert [r["item"]["id"] for r in data["results"]] == ["k-1", "k-3"]
        assert data["total_count"] == 2
        assert data["query"] == "laptop"
        assert data["cache_hit"] is False
        assert "contractTitle" in data["results"][0]["matched_fields"]
    
    def test_instant_search_does_not_record_history(self, client, contracts):
        client.post("/api/v1/search/contracts", json={"query": "laptop", "items": contracts})
        
        response = client.get("/api/v1/history/contracts")
        assert response.status_code == 200
        assert response.json() == []
    
    def test_search_with_options(self, client, contracts):
        """Test per-call overrides in the request body."""
        response = client.post(
            "/api/v1/search/contracts",
            json={"query": "laptop", "items": contracts, "options": {"max_results": 1}}
        )
        assert response.status_code == 200
        
        data = response.json()
        assert len(data["results"]) == 1
        assert data["total_count"] == 2
    
    def test_search_invalid_options(self, client, contracts):
        """Test that out-of-range options are rejected."""
        response = client.post(
            "/api/v1/search/contracts",
            json={"query": "laptop", "items": contracts, "options": {"fuzzy_threshold": 2}}
        )
        assert response.status_code == 422
    
    def test_empty_query_lists_items(self, client, contracts):
        response = client.post("/api/v1/search/contracts", json={"query": "", "items": contracts})
        assert response.status_code == 200
        
        data = response.json()
        assert data["total_count"] == 3
        assert all(r["score"] == 1 for r in data["results"])
    
    def test_unknown_preset(self, client, contracts):
        response = client.post("/api/v1/search/unknown", json={"query": "x", "items": contracts})
        assert response.status_code == 404
        assert "unknown" in response.json()["detail"]

    def test_query_too_long(self, client, contracts):
        response = client.post(
            "/api/v1/search/contracts", json={"query": "x" * 101, "items": contracts}
        )
        assert response.status_code == 400
        assert "Query too long" in response.json()["detail"]

        response = client.post(
            "/api/v1/search/contracts", json={"query": "x" * 100, "items": contracts}
        )
        assert response.status_code == 200
    
    def test_debounced_search_records_history(self, client, contracts):
        response = client.post(
            "/api/v1/search/contracts/debounced",
            json={"query": "laptop", "items": contracts, "options": {"debounce_ms": 0}}
        )
        assert response.status_code == 200
        assert response.json()["total_count"] == 2
        
        history = client.get("/api/v1/history/contracts").json()
        assert history == ["laptop"]
        
        response = client.delete("/api/v1/history/contracts")
        assert response.status_code == 204
        assert client.get("/api/v1/history/contracts").json() == []
    
    def test_cache_stats_and_clear(self, client, contracts):
        for _ in range(2):
            client.post("/api/v1/search/contracts", json={"query": "laptop", "items": contracts})
        
        stats = client.get("/api/v1/cache/contracts/stats").json()
        assert stats["size"] == 1
        assert stats["entries"] == 1
        assert stats["hit_rate"] == pytest.approx(0.5)
        
        response = client.delete("/api/v1/cache/contracts")
        assert response.status_code == 204
        assert client.get("/api/v1/cache/contracts/stats").json()["size"] == 0
    
    def test_health_check(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        
        data = response.json()
        assert data["status"] == "healthy"
        assert set(data["dependencies"]) == {"tenders", "contracts", "competitors"}
    
    def test_liveness_check(self, client):
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["status"] == "alive"
    
    def test_metrics(self, client, contracts):
        client.post("/api/v1/search/contracts", json={"query": "laptop", "items": contracts})
        
        response = client.get("/api/v1/metrics")
        assert response.status_code == 200
        
        data = response.json()
        assert data["total_queries"] >= 1
        assert data["memory_usage_mb"] > 0
        assert "contracts" in data["engines"]
