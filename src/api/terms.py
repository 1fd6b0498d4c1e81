"""
Term API Routes

GET /api/terms        - filtered, paginated term listing
GET /api/terms/{id}   - one term plus up to 5 related terms
GET /api/random       - random terms without replacement

Numeric parameters are accepted as raw strings and parsed by
parse_int_param so malformed values fall back to their defaults instead of
failing validation with a 422.

Patterns Applied:
- FastAPI router per resource
- Dependency injection for the CatalogStore
- Endpoint logic delegated to src.engine
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_catalog_store
from src.catalog.models import ALL_FILTER, Term, TermDetail, TermListResult
from src.catalog.store import CatalogStore
from src.engine.params import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    DEFAULT_RANDOM_COUNT,
    parse_int_param,
)
from src.engine.query import TermQuery, query_terms
from src.engine.related import resolve_term_detail
from src.engine.sampler import sample_terms

ERROR_TERM_NOT_FOUND = "Term not found"

StoreDep = Annotated[CatalogStore, Depends(get_catalog_store)]

terms_router = APIRouter(prefix="/api", tags=["terms"])


@terms_router.get("/terms", response_model=TermListResult)
async def list_terms(
    store: StoreDep,
    category: Annotated[str, Query(description="Category id or 'all'")] = ALL_FILTER,
    difficulty: Annotated[str, Query(description="Difficulty or 'all'")] = ALL_FILTER,
    search: Annotated[str, Query(description="Free-text filter")] = "",
    limit: Annotated[str | None, Query(description="Page size (default 50)")] = None,
    offset: Annotated[str | None, Query(description="Terms to skip (default 0)")] = None,
) -> TermListResult:
    """List terms matching the category, difficulty and search filters.

    A category other than 'all' replaces the whole catalog as the working
    set; search and difficulty then narrow that category only.
    """
    query = TermQuery(
        category=category,
        difficulty=difficulty,
        search=search,
        limit=parse_int_param("limit", limit, DEFAULT_LIMIT, minimum=0),
        offset=parse_int_param("offset", offset, DEFAULT_OFFSET, minimum=0),
    )
    return query_terms(store, query)


@terms_router.get(
    "/terms/{term_id}",
    response_model=TermDetail,
    responses={404: {"description": ERROR_TERM_NOT_FOUND}},
)
async def get_term(term_id: str, store: StoreDep) -> TermDetail:
    """Fetch one term with its related terms.

    Raises:
        TermNotFoundError: Rendered as 404 {"error": "Term not found"}
    """
    return resolve_term_detail(store, term_id)


@terms_router.get("/random", response_model=list[Term])
async def random_terms(
    store: StoreDep,
    count: Annotated[str | None, Query(description="Number of terms (default 1)")] = None,
) -> list[Term]:
    """Return random terms in random order, without duplicates."""
    return sample_terms(store, parse_int_param("count", count, DEFAULT_RANDOM_COUNT))
