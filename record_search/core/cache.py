"""Bounded result cache and search history owned by an engine."""

import threading
from collections import OrderedDict
from typing import Dict, List, Optional

from ..models.response import SearchResponse


class ResultCache:
    """Insertion-ordered response cache evicting the oldest entry when full."""
    
    def __init__(self, max_size: int = 100) -> None:
        """
        Initialize the cache.
        
        Args:
            max_size: Maximum number of cached responses
        """
        self.max_size = max_size
        self._entries: "OrderedDict[str, SearchResponse]" = OrderedDict()
        self._lock = threading.RLock()
        self._stats = {
            "hits": 0,
            "misses": 0,
            "evictions": 0
        }
    
    def get(self, key: str) -> Optional[SearchResponse]:
        """
        Look up a cached response without changing eviction order.
        
        Args:
            key: Cache key
            
        Returns:
            Cached response or None
        """
        with self._lock:
            response = self._entries.get(key)
            if response is None:
                self._stats["misses"] += 1
            else:
                self._stats["hits"] += 1
            return response
    
    def put(self, key: str, response: SearchResponse) -> None:
        """
        Store a response, evicting the oldest-inserted entry if over capacity.
        
        Args:
            key: Cache key
            response: Response to cache
        """
        with self._lock:
            self._entries[key] = response
            if len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
                self._stats["evictions"] += 1
    
    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
    
    def keys(self) -> List[str]:
        """Cache keys, oldest first."""
        with self._lock:
            return list(self._entries.keys())
    
    @property
    def hit_rate(self) -> float:
        """Hits over lookups since the last clear, 0.0 before any lookup."""
        with self._lock:
            lookups = self._stats["hits"] + self._stats["misses"]
            return self._stats["hits"] / lookups if lookups else 0.0
    
    def get_stats(self) -> Dict[str, int]:
        """Get hit, miss and eviction counters."""
        with self._lock:
            return self._stats.copy()
    
    def clear(self) -> None:
        """Remove all entries and reset counters."""
        with self._lock:
            self._entries.clear()
            self._stats = {
                "hits": 0,
                "misses": 0,
                "evictions": 0
            }


class SearchHistory:
    """Most-recent-first list of distinct queries."""
    
    def __init__(self, max_size: int = 10) -> None:
        self.max_size = max_size
        self._queries: List[str] = []
        self._lock = threading.RLock()
    
    def add(self, query: str) -> bool:
        """
        Record a query at the front of the history.
        
        Blank queries and queries already present are ignored; a repeat is
        not moved to the front.
        
        Args:
            query: Raw query text
            
        Returns:
            True if the query was inserted
        """
        query = query.strip()
        if not query:
            return False
        
        with self._lock:
            if query in self._queries:
                return False
            self._queries.insert(0, query)
            del self._queries[self.max_size:]
            return True
    
    def matching(self, query: str, limit: int = 3) -> List[str]:
        """
        Entries containing query case-insensitively, excluding query itself.
        
        Args:
            query: Query to match
            limit: Maximum number of entries
            
        Returns:
            Matching entries, most recent first
        """
        needle = query.lower()
        with self._lock:
            return [
                entry for entry in self._queries
                if needle in entry.lower() and entry != query
            ][:limit]
    
    def to_list(self) -> List[str]:
        """Copy of the history, most recent first."""
        with self._lock:
            return list(self._queries)
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._queries)
    
    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._queries = []
