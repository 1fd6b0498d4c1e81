"""
Glossary-Term-Service - Health API Routes

GET /health - liveness probe
GET /ready  - readiness probe, 503 until the catalog is loaded

Patterns Applied:
- Health Check Pattern
- HealthService class reading app.state
- Pydantic response models

Anti-Patterns Avoided:
- Bare except clauses
- Missing response models
"""

from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.catalog.store import CatalogStore
from src.core.logging import SERVICE_NAME, get_logger

router = APIRouter(tags=["health"])

logger = get_logger(__name__)


# =============================================================================
# Response Models
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    version: str
    service: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""
    status: str
    checks: dict[str, bool]
    catalog: dict[str, int] | None = None


# =============================================================================
# Health Service
# =============================================================================


class HealthService:
    """Service class for health check operations.

    Returns structured {"status": "healthy", ...} responses.
    """

    def __init__(self, version: str = "0.1.0"):
        """Initialize health service.

        Args:
            version: Service version string
        """
        self._version = version

    def check_health(self) -> dict[str, Any]:
        """Check basic service health.

        Returns:
            Health status dictionary with status, version, service
        """
        return {
            "status": "healthy",
            "version": self._version,
            "service": SERVICE_NAME,
        }

    def check_readiness(self, store: CatalogStore | None) -> tuple[dict[str, Any], bool]:
        """Check if service is ready to accept requests.

        Args:
            store: The loaded catalog, or None before the lifespan ran

        Returns:
            Tuple of (readiness dict, is_ready bool)
        """
        checks = {
            "catalog_loaded": store is not None,
        }

        is_ready = all(checks.values())

        result: dict[str, Any] = {
            "status": "ready" if is_ready else "not_ready",
            "checks": checks,
        }
        if store is not None:
            result["catalog"] = {
                "terms": len(store),
                "categories": len(store.category_names()),
            }

        return result, is_ready


def get_health_service(request: Request) -> HealthService:
    """Build a health service reporting the running app's version."""
    return HealthService(version=request.app.version)


# =============================================================================
# Endpoints
# =============================================================================


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Basic health check endpoint for liveness probe",
)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint."""
    data = get_health_service(request).check_health()
    logger.debug("health_check", status=data["status"])
    return HealthResponse(**data)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={
        200: {"description": "Service is ready"},
        503: {"description": "Service is not ready"},
    },
    summary="Readiness Check",
    description="Readiness check endpoint, ready once the catalog is loaded",
)
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness check endpoint.

    Returns:
        200 if ready, 503 if not ready
    """
    store = getattr(request.app.state, "catalog", None)
    data, is_ready = get_health_service(request).check_readiness(store)

    status_code = status.HTTP_200_OK if is_ready else status.HTTP_503_SERVICE_UNAVAILABLE

    logger.debug("readiness_check", status=data["status"], is_ready=is_ready)
    return JSONResponse(content=data, status_code=status_code)
