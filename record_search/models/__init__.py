"""Data models for record search."""

from .config import SearchConfig, SearchOptions
from .response import (
    SearchResult,
    SearchResponse,
    CacheStats,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import SearchRequest

__all__ = [
    "SearchConfig",
    "SearchOptions",
    "SearchResult",
    "SearchResponse",
    "CacheStats",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "SearchRequest",
]
