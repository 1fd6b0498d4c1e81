"""
Relatedness Resolver

A candidate is related to a source term when either:
- their tag sets intersect, or
- one of the source's related_term_names is a substring of the candidate's
  name (partial matches count, "scope" relates to "scope_chain").

The first MAX_RELATED_TERMS matches in catalog order are returned. There is
no scoring between the two kinds of match.
"""

from __future__ import annotations

from typing import Final

from src.catalog.models import RelatedTerm, Term, TermDetail
from src.catalog.store import CatalogStore
from src.core.exceptions import TermNotFoundError
from src.core.logging import get_logger
from src.core.tracing import get_tracer

MAX_RELATED_TERMS: Final[int] = 5

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def is_related(source: Term, candidate: Term) -> bool:
    """Whether candidate should be listed as related to source."""
    if source.shares_tag_with(candidate):
        return True
    return any(hint in candidate.name for hint in source.related_term_names)


def find_related_terms(
    store: CatalogStore,
    source: Term,
    limit: int = MAX_RELATED_TERMS,
) -> list[RelatedTerm]:
    """Collect up to ``limit`` related terms, never including source itself."""
    related: list[RelatedTerm] = []
    for candidate in store.all_terms():
        if len(related) >= limit:
            break
        if candidate.id == source.id:
            continue
        if is_related(source, candidate):
            related.append(RelatedTerm.from_term(candidate))
    return related


def resolve_term_detail(store: CatalogStore, term_id: str) -> TermDetail:
    """Fetch one term together with its related terms.

    Args:
        store: The loaded catalog.
        term_id: Exact term id.

    Returns:
        TermDetail carrying every Term field plus related_terms.

    Raises:
        TermNotFoundError: If no term has this id.
    """
    with tracer.start_as_current_span("terms.detail") as span:
        span.set_attribute("term.id", term_id)

        term = store.get_term(term_id)
        if term is None:
            logger.info("term_not_found", term_id=term_id)
            raise TermNotFoundError(term_id)

        related = find_related_terms(store, term)
        span.set_attribute("result.related_count", len(related))

        return TermDetail(**term.model_dump(), related_terms=related)
