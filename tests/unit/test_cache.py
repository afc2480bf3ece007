"""Unit tests for the result cache and search history."""

import pytest

from record_search.core.cache import ResultCache, SearchHistory
from record_search.models.response import SearchResponse


def make_response(query: str) -> SearchResponse:
    return SearchResponse(results=[], total_count=0, search_time_ms=0.0, query=query)


class TestResultCache:
    """Test cases for the ResultCache class."""
    
    @pytest.fixture
    def cache(self):
        return ResultCache(max_size=3)
    
    def test_initialization(self, cache):
        assert len(cache) == 0
        assert cache.hit_rate == 0.0
        assert cache.get_stats() == {"hits": 0, "misses": 0, "evictions": 0}
    
    def test_put_and_get(self, cache):
        cache.put("a", make_response("a"))
        
        assert "a" in cache
        assert cache.get("a").query == "a"
        assert cache.get("b") is None
        assert cache.hit_rate == pytest.approx(0.5)
    
    def test_evicts_oldest_inserted(self, cache):
        for key in ["a", "b", "c", "d"]:
            cache.put(key, make_response(key))
        
        assert cache.keys() == ["b", "c", "d"]
        assert cache.get_stats()["evictions"] == 1
    
    def test_lookup_does_not_refresh_entry(self, cache):
        """Eviction follows insertion order, not access order."""
        for key in ["a", "b", "c"]:
            cache.put(key, make_response(key))
        cache.get("a")
        cache.put("d", make_response("d"))
        
        assert "a" not in cache
    
    def test_clear(self, cache):
        cache.put("a", make_response("a"))
        cache.get("a")
        cache.clear()
        
        assert len(cache) == 0
        assert cache.hit_rate == 0.0


class TestSearchHistory:
    """Test cases for the SearchHistory class."""
    
    @pytest.fixture
    def history(self):
        return SearchHistory(max_size=3)
    
    def test_most_recent_first(self, history):
        history.add("alpha")
        history.add("beta")
        
        assert history.to_list() == ["beta", "alpha"]
    
    def test_trims_and_skips_blank(self, history):
        assert history.add("  alpha  ") is True
        assert history.add("   ") is False
        
        assert history.to_list() == ["alpha"]
    
    def test_duplicates_are_not_promoted(self, history):
        history.add("alpha")
        history.add("beta")
        
        assert history.add("alpha") is False
        assert history.to_list() == ["beta", "alpha"]
    
    def test_bounded(self, history):
        for query in ["a", "b", "c", "d"]:
            history.add(query)
        
        assert history.to_list() == ["d", "c", "b"]
    
    def test_matching(self, history):
        for query in ["acme corp", "acme", "zenith"]:
            history.add(query)
        
        assert history.matching("ACME") == ["acme", "acme corp"]
        assert history.matching("acme") == ["acme corp"]
        assert history.matching("a", limit=1) == ["acme"]
