"""FastAPI application serving the preset search engines."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog
import uvicorn

from .api import (
    search_router,
    cache_router,
    health_router,
    metrics_router,
)
from .config import get_settings
from .log_config import configure_logging
from .models.response import ErrorResponse
from .presets import search_engines

settings = get_settings()
configure_logging(settings)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Record search started", presets=list(search_engines))
    yield
    for engine in search_engines.values():
        engine.clear_cache()
    logger.info("Record search stopped")


app = FastAPI(
    title=settings.app_name,
    description="Fuzzy ranking search over posted record collections",
    version=settings.app_version,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["*"],
)
# Result lists with highlights compress well
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log each request with its status and duration."""
    start_time = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "Request handled",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time_ms=round((time.perf_counter() - start_time) * 1000, 2)
    )
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", path=request.url.path, error=str(exc), exc_info=True)
    error = ErrorResponse(
        error="Internal Server Error",
        message="An unexpected error occurred",
        details={"exception": str(exc)} if settings.debug else None
    )
    return JSONResponse(status_code=500, content=error.model_dump(mode="json"))


app.include_router(search_router)
app.include_router(cache_router)
app.include_router(health_router)
app.include_router(metrics_router)


@app.get("/", summary="Service information")
async def root() -> dict:
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "presets": list(search_engines),
    }


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    uvicorn.run(
        "record_search.main:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        log_level=settings.log_level.lower()
    )
