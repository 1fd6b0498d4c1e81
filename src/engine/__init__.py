"""Term Query Engine: filtering, relatedness, statistics and sampling.

Every function here is a synchronous, pure read over a CatalogStore (plus
the sampler's random source); none mutates the catalog.
"""

from src.engine.params import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    DEFAULT_RANDOM_COUNT,
    parse_int_param,
)
from src.engine.query import TermQuery, filter_terms, matches_search, query_terms
from src.engine.related import (
    MAX_RELATED_TERMS,
    find_related_terms,
    is_related,
    resolve_term_detail,
)
from src.engine.sampler import sample_terms
from src.engine.stats import compute_stats

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_OFFSET",
    "DEFAULT_RANDOM_COUNT",
    "MAX_RELATED_TERMS",
    "TermQuery",
    "compute_stats",
    "filter_terms",
    "find_related_terms",
    "is_related",
    "matches_search",
    "parse_int_param",
    "query_terms",
    "resolve_term_detail",
    "sample_terms",
]
