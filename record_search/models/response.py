"""Response models for the search engine and API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResult(BaseModel):
    """Individual ranked match."""
    
    item: Any = Field(..., description="The matched record")
    score: float = Field(..., ge=0.0, description="Aggregate score")
    matched_fields: List[str] = Field(
        default_factory=list, description="Matched field paths in scan order"
    )
    highlights: Dict[str, str] = Field(
        default_factory=dict, description="Marked-up field values keyed by field path"
    )


class SearchResponse(BaseModel):
    """Response for a search call."""
    
    results: List[SearchResult] = Field(..., description="Ranked results")
    total_count: int = Field(..., ge=0, description="Matching items before truncation")
    search_time_ms: float = Field(..., description="Search execution time in milliseconds")
    query: str = Field(..., description="Original search query")
    suggestions: List[str] = Field(default_factory=list, description="Query suggestions")
    cache_hit: bool = Field(default=False, description="Whether result was served from cache")


class CacheStats(BaseModel):
    """Result cache statistics."""
    
    size: int = Field(..., description="Current number of cached responses")
    entries: int = Field(..., description="Current number of cached responses")
    hit_rate: float = Field(..., ge=0.0, le=1.0, description="Hits over lookups since last clear")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""
    
    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average response time")
    cache_hit_rate: float = Field(..., description="Cache hit rate across presets")
    memory_usage_mb: float = Field(..., description="Process memory usage in MB")
    engines: Dict[str, Dict[str, Any]] = Field(..., description="Per-preset engine statistics")
    timestamp: datetime = Field(default_factory=_utcnow, description="Metrics timestamp")
