"""
Statistics Aggregator

Recomputed from scratch on every call; the catalog never changes, so there
is nothing to cache or invalidate. Cost is O(N) over AllTerms.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone

from src.catalog.models import DIFFICULTY_LEVELS, CatalogStats
from src.catalog.store import CatalogStore
from src.core.tracing import get_tracer

tracer = get_tracer(__name__)


def compute_stats(store: CatalogStore, now: datetime | None = None) -> CatalogStats:
    """Snapshot catalog composition.

    Args:
        store: The loaded catalog.
        now: Timestamp to report; defaults to the current UTC time.

    Returns:
        CatalogStats with totals, per-difficulty and per-category counts.
    """
    with tracer.start_as_current_span("catalog.stats") as span:
        terms = store.all_terms()
        counts = Counter(term.difficulty.value for term in terms)
        span.set_attribute("result.total_terms", len(terms))

        return CatalogStats(
            total_terms=len(terms),
            category_count=len(store.category_names()),
            # Fixed buckets: every level is reported, zero included
            by_difficulty={level: counts.get(level, 0) for level in DIFFICULTY_LEVELS},
            by_category={name: len(store.terms_of(name)) for name in store.category_names()},
            generated_at=now or datetime.now(timezone.utc),
        )
