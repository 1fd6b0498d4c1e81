"""
Glossary-Term-Service - Main Application Entry Point

- FastAPI app with lifespan handler that loads the catalog once
- uvicorn src.main:app starts the service

Patterns Applied:
- Lifespan context manager
- One-time configure_logging() at startup
- Error envelopes: {"error": ...} for 404s, {"error", "message"} for 500s

Anti-Patterns Avoided:
- Deprecated @app.on_event - using modern lifespan pattern
- structlog.configure() per request - one-time at startup
- Catalog loaded per request - loaded once into app.state
"""

import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.catalog import catalog_router
from src.api.health import router as health_router
from src.api.terms import ERROR_TERM_NOT_FOUND, terms_router
from src.catalog.store import CatalogStore
from src.core.config import get_settings
from src.core.exceptions import TermNotFoundError
from src.core.logging import configure_logging, get_logger
from src.core.tracing import configure_tracing

ERROR_API_NOT_FOUND = "API endpoint not found"
ERROR_INTERNAL = "Internal server error"
GENERIC_ERROR_MESSAGE = "Something went wrong"

settings = get_settings()

# Configure logging ONCE at module load
configure_logging(
    log_level=settings.log_level,
    json_output=settings.log_json,
)

logger = get_logger(__name__)


# =============================================================================
# Lifespan Context Manager
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager for startup/shutdown events.

    Loads the catalog unless one was already placed on app.state. A
    CatalogLoadError propagates and aborts startup.
    """
    logger.info(
        "startup",
        service=settings.service_name,
        version=settings.version,
        environment=settings.environment,
    )

    if settings.tracing_enabled:
        configure_tracing(
            service_name=settings.service_name,
            service_version=settings.version,
            console_export=settings.tracing_console_export,
        )
        logger.info("tracing_configured")

    owns_catalog = getattr(app.state, "catalog", None) is None
    if owns_catalog:
        app.state.catalog = CatalogStore.load(
            settings.catalog_path,
            settings.display_names_path,
        )

    yield

    logger.info("shutdown", service=settings.service_name)
    if owns_catalog:
        app.state.catalog = None


# =============================================================================
# FastAPI Application
# =============================================================================


app = FastAPI(
    title="Glossary-Term-Service",
    description="Read-only programming glossary: search, related terms, categories and stats",
    version=settings.version,
    docs_url="/docs" if settings.environment != "production" else None,
    redoc_url="/redoc" if settings.environment != "production" else None,
    lifespan=lifespan,
)

app.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.resolved_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Emit one access-log event per request, including failed ones."""
    start_time = time.perf_counter()
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status=status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )


# Include routers
app.include_router(health_router)
app.include_router(terms_router)
app.include_router(catalog_router)


# =============================================================================
# Exception Handlers
# =============================================================================


def _is_api_path(path: str) -> bool:
    return path == "/api" or path.startswith("/api/")


@app.exception_handler(TermNotFoundError)
async def term_not_found_handler(request: Request, exc: TermNotFoundError) -> JSONResponse:
    """Render a missing term as 404 {"error": "Term not found"}."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": ERROR_TERM_NOT_FOUND},
    )


@app.exception_handler(StarletteHTTPException)
async def api_not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render unmatched /api routes as 404 {"error": "API endpoint not found"}."""
    if exc.status_code == status.HTTP_404_NOT_FOUND and _is_api_path(request.url.path):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": ERROR_API_NOT_FOUND},
        )
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any other failure as 500; details only in development."""
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    message = str(exc) if settings.is_development else GENERIC_ERROR_MESSAGE
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": ERROR_INTERNAL, "message": message},
    )


# =============================================================================
# Root endpoint
# =============================================================================


@app.get("/", include_in_schema=False)
async def root() -> dict[str, Any]:
    """Root endpoint listing the API surface."""
    return {
        "service": settings.service_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": [
            "GET /api/terms",
            "GET /api/terms/{id}",
            "GET /api/categories",
            "GET /api/stats",
            "GET /api/random",
        ],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host=settings.host, port=settings.port)
