"""Metrics and monitoring API endpoints."""

import psutil
from fastapi import APIRouter, HTTPException

from ..models.response import MetricsResponse
from ..presets import search_engines

router = APIRouter(prefix="/api/v1", tags=["metrics"])


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get query, cache and memory metrics across the preset engines"
)
async def get_metrics() -> MetricsResponse:
    """
    Get performance metrics for the preset engines.
    
    Query counts and execution times are summed across engines; the cache
    hit rate is computed over all cache lookups.
    """
    try:
        engines = {name: engine.get_stats() for name, engine in search_engines.items()}
        
        total_queries = sum(stats["total_queries"] for stats in engines.values())
        total_execution_time = sum(stats["total_execution_time"] for stats in engines.values())
        hits = sum(stats["cache_hits"] for stats in engines.values())
        lookups = hits + sum(stats["cache_misses"] for stats in engines.values())
        
        memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)
        
        return MetricsResponse(
            total_queries=total_queries,
            average_response_time_ms=(
                total_execution_time / total_queries if total_queries else 0.0
            ),
            cache_hit_rate=hits / lookups if lookups else 0.0,
            memory_usage_mb=memory_usage_mb,
            engines=engines
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )
