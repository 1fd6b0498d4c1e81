"""
Catalog API Routes

GET /api/categories - category ids, counts and display names
GET /api/stats      - catalog composition snapshot
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_catalog_store
from src.catalog.models import CatalogStats, CategorySummary
from src.catalog.store import CatalogStore
from src.engine.stats import compute_stats

catalog_router = APIRouter(prefix="/api", tags=["catalog"])


@catalog_router.get("/categories", response_model=list[CategorySummary])
async def list_categories(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> list[CategorySummary]:
    """List categories in declaration order."""
    return store.categories()


@catalog_router.get("/stats", response_model=CatalogStats)
async def catalog_stats(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
) -> CatalogStats:
    """Compute catalog statistics at request time."""
    return compute_stats(store)
