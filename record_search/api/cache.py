"""Search history and result cache API endpoints."""

from typing import List

from fastapi import APIRouter, Path, Response

from ..models.response import CacheStats
from .search import resolve_engine

router = APIRouter(prefix="/api/v1", tags=["cache"])


@router.get(
    "/history/{preset}",
    response_model=List[str],
    summary="Get search history",
    description="Recent distinct debounced queries for a preset, most recent first"
)
async def get_history(preset: str = Path(..., description="Preset engine name")) -> List[str]:
    """Get the search history of a preset engine."""
    return resolve_engine(preset).get_search_history()


@router.delete(
    "/history/{preset}",
    status_code=204,
    summary="Clear search history"
)
async def clear_history(preset: str = Path(..., description="Preset engine name")) -> Response:
    """Clear the search history of a preset engine."""
    resolve_engine(preset).clear_history()
    return Response(status_code=204)


@router.get(
    "/cache/{preset}/stats",
    response_model=CacheStats,
    summary="Get cache statistics"
)
async def get_cache_stats(preset: str = Path(..., description="Preset engine name")) -> CacheStats:
    """Get result cache statistics of a preset engine."""
    return resolve_engine(preset).get_cache_stats()


@router.delete(
    "/cache/{preset}",
    status_code=204,
    summary="Clear result cache"
)
async def clear_cache(preset: str = Path(..., description="Preset engine name")) -> Response:
    """Clear the result cache of a preset engine."""
    resolve_engine(preset).clear_cache()
    return Response(status_code=204)
