"""
Record Search - fuzzy ranking search over in-memory record collections.

This package scores and ranks arbitrary records against a free-text query
using exact, prefix, substring and edit-distance matching across configurable
fields, with result caching, query history, suggestions and debounced search.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .models.config import SearchConfig, SearchOptions
from .models.response import SearchResult, SearchResponse, CacheStats

__all__ = [
    "SearchEngine",
    "SearchConfig",
    "SearchOptions",
    "SearchResult",
    "SearchResponse",
    "CacheStats",
]
