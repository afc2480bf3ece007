"""API endpoints for record search."""

from .search import router as search_router
from .cache import router as cache_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "search_router",
    "cache_router",
    "health_router",
    "metrics_router",
]
