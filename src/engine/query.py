"""
Query Engine - term listing with filters and pagination.

Filter semantics:
1. category: when set and not "all", the working set becomes exactly that
   category's terms. This replaces the full catalog instead of intersecting
   with it; an unknown category yields an empty working set.
2. difficulty: when set and not "all", strict equality on the difficulty
   value; an unknown value yields an empty result.
3. search: trimmed; when non-empty, a term matches if the lowercased query is
   a substring of the lowercased name, description or any tag, or if the
   query (case preserved) is a substring of the localized label.
4. offset/limit slice the filtered sequence. Filtering never reorders.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.catalog.models import ALL_FILTER, Term, TermListResult
from src.catalog.store import CatalogStore
from src.core.tracing import get_tracer
from src.engine.params import DEFAULT_LIMIT, DEFAULT_OFFSET

tracer = get_tracer(__name__)


@dataclass(frozen=True, slots=True)
class TermQuery:
    """Parsed parameters of a term listing request.

    Attributes:
        category: Category id, or "all".
        difficulty: Difficulty value, or "all".
        search: Free-text query; empty disables the search filter.
        limit: Page size, non-negative.
        offset: Number of filtered terms to skip, non-negative.
    """

    category: str = ALL_FILTER
    difficulty: str = ALL_FILTER
    search: str = ""
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET


def matches_search(term: Term, search: str) -> bool:
    """Check a term against an already-trimmed, non-empty search string."""
    needle = search.lower()
    return (
        needle in term.name.lower()
        or search in term.localized_label
        or needle in term.description.lower()
        or any(needle in tag.lower() for tag in term.tags)
    )


def filter_terms(store: CatalogStore, query: TermQuery) -> list[Term]:
    """Apply the category, difficulty and search filters, preserving order."""
    terms: Iterable[Term]
    if query.category and query.category != ALL_FILTER:
        terms = store.terms_of(query.category)
    else:
        terms = store.all_terms()

    if query.difficulty and query.difficulty != ALL_FILTER:
        terms = (t for t in terms if t.difficulty.value == query.difficulty)

    search = query.search.strip()
    if search:
        terms = (t for t in terms if matches_search(t, search))

    return list(terms)


def query_terms(store: CatalogStore, query: TermQuery) -> TermListResult:
    """Answer a term listing request.

    Args:
        store: The loaded catalog.
        query: Filters and pagination.

    Returns:
        TermListResult with the requested page, the filtered total and
        whether more results follow the page.
    """
    with tracer.start_as_current_span("terms.query") as span:
        span.set_attribute("query.category", query.category)
        span.set_attribute("query.difficulty", query.difficulty)
        span.set_attribute("query.limit", query.limit)
        span.set_attribute("query.offset", query.offset)

        filtered = filter_terms(store, query)
        end = query.offset + query.limit
        page = filtered[query.offset:end]

        span.set_attribute("result.total", len(filtered))
        span.set_attribute("result.page_size", len(page))

        return TermListResult(
            terms=page,
            total=len(filtered),
            has_more=end < len(filtered),
            categories=store.category_names(),
        )
