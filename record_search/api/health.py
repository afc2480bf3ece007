"""Health check API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..models.response import HealthResponse
from ..config import get_settings
from ..presets import search_engines

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()

_PROBE_ITEMS = [{"id": "probe", "name": "health probe"}]


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search engines"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on every preset engine.
    
    Each engine lists a one-item probe collection for a blank query,
    which touches neither the cache nor the history.
    """
    try:
        uptime = time.time() - app_start_time
        
        dependencies = {}
        for name, engine in search_engines.items():
            try:
                probe = engine.instant_search("", _PROBE_ITEMS)
                dependencies[name] = "healthy" if probe.total_count == 1 else "degraded"
            except Exception:
                dependencies[name] = "unhealthy"
        
        # Determine overall status
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"
        
        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
