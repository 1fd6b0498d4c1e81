"""
Shared FastAPI dependencies.

The CatalogStore is built once in the lifespan handler and parked on
app.state; routes receive it through get_catalog_store instead of importing
a module-level global.
"""

from fastapi import HTTPException, Request, status

from src.catalog.store import CatalogStore

ERROR_CATALOG_NOT_LOADED = "Catalog not loaded"


def get_catalog_store(request: Request) -> CatalogStore:
    """Return the process-wide catalog.

    Raises:
        HTTPException: 503 if the lifespan handler has not loaded it yet
    """
    store: CatalogStore | None = getattr(request.app.state, "catalog", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=ERROR_CATALOG_NOT_LOADED,
        )
    return store
