"""Search API endpoints."""

from fastapi import APIRouter, HTTPException, Path, Response

from ..core.engine import SearchEngine
from ..models.request import SearchRequest
from ..models.response import SearchResponse
from ..config import get_settings
from ..presets import get_engine

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()


def resolve_engine(preset: str) -> SearchEngine:
    """Get a preset engine or raise 404."""
    engine = get_engine(preset)
    if engine is None:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown search preset '{preset}'"
        )
    return engine


def _check_query(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


@router.post(
    "/search/{preset}",
    response_model=SearchResponse,
    summary="Rank records instantly",
    description="Rank the posted records against a query using a preset engine, without debouncing"
)
async def instant_search(
    request: SearchRequest,
    preset: str = Path(..., description="Preset engine: tenders, contracts or competitors")
) -> SearchResponse:
    """
    Rank the posted records against a query.
    
    The query is not recorded in the search history.
    """
    engine = resolve_engine(preset)
    _check_query(request.query)
    
    try:
        return engine.instant_search(request.query, request.items, request.options)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search/{preset}/debounced",
    response_model=SearchResponse,
    responses={204: {"description": "Superseded by a later debounced search"}},
    summary="Rank records after the debounce window",
    description="Debounced search that records the query in the preset's history"
)
async def debounced_search(
    request: SearchRequest,
    preset: str = Path(..., description="Preset engine: tenders, contracts or competitors")
):
    """
    Rank the posted records once the debounce window has elapsed.
    
    A later debounced request against the same preset supersedes this one,
    which then completes with 204 No Content.
    """
    engine = resolve_engine(preset)
    _check_query(request.query)
    
    try:
        result = await engine.search(request.query, request.items, request.options)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )
    
    if result is None:
        return Response(status_code=204)
    return result
