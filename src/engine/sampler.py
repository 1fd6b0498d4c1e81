"""
Random Sampler

Draws terms without replacement using a uniform Fisher-Yates shuffle
(random.Random.shuffle) over a copy of AllTerms, then keeps the first
``count``. The random source is injectable so tests can seed it.
"""

from __future__ import annotations

import random

from src.catalog.models import Term
from src.catalog.store import CatalogStore
from src.core.tracing import get_tracer

tracer = get_tracer(__name__)

_default_rng = random.Random()


def sample_terms(
    store: CatalogStore,
    count: int,
    rng: random.Random | None = None,
) -> list[Term]:
    """Return ``count`` distinct terms in random order.

    Args:
        store: The loaded catalog.
        count: Number of terms wanted. ``<= 0`` yields an empty list; values
            at or above the catalog size yield the whole catalog shuffled.
        rng: Random source; the module-level generator when omitted.

    Returns:
        List of full Term records with no duplicate ids.
    """
    with tracer.start_as_current_span("terms.random") as span:
        span.set_attribute("query.count", count)
        if count <= 0:
            return []

        shuffled = list(store.all_terms())
        (rng or _default_rng).shuffle(shuffled)
        return shuffled[:count]
