"""Glossary catalog: immutable term records and the store that owns them."""

from src.catalog.models import (
    ALL_FILTER,
    DIFFICULTY_LEVELS,
    CatalogStats,
    Category,
    CategorySummary,
    Difficulty,
    RelatedTerm,
    Term,
    TermDetail,
    TermListResult,
)
from src.catalog.store import CatalogStore

__all__ = [
    "ALL_FILTER",
    "DIFFICULTY_LEVELS",
    "CatalogStats",
    "CatalogStore",
    "Category",
    "CategorySummary",
    "Difficulty",
    "RelatedTerm",
    "Term",
    "TermDetail",
    "TermListResult",
]
