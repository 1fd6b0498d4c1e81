"""
Catalog Store

Owns the canonical categorized term data. Built exactly once at startup from
the bundled JSON definition and never mutated afterwards; every query reads
the same instance.

Definition format (glossary_catalog.json):
{
    "categories": [
        {"name": "javascript", "terms": [{"id": "js_1", "name": "closure", ...}]},
        ...
    ]
}

Display names come from a flat YAML mapping of category id -> label.

Anti-Patterns Avoided:
- Catalog rebuilt per request (built once, shared read-only)
- Silent data loss: unknown difficulty or duplicate ids fail the load
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from src.catalog.models import Category, CategorySummary, Term
from src.core.exceptions import CatalogLoadError
from src.core.logging import get_logger

logger = get_logger(__name__)


class CatalogStore:
    """Read-only holder of the catalog and its flattened AllTerms view.

    Example:
        >>> store = CatalogStore.load(Path("glossary_catalog.json"))
        >>> [t.id for t in store.terms_of("react")]
        ['react_1', 'react_2']
    """

    __slots__ = ("_categories", "_all_terms", "_by_id", "_display_names")

    def __init__(
        self,
        categories: list[Category],
        display_names: Mapping[str, str] | None = None,
    ) -> None:
        """
        Build a store from already-parsed categories.

        Args:
            categories: Categories in declaration order.
            display_names: Category id -> display label.

        Raises:
            CatalogLoadError: If a category name or term id is repeated.
        """
        by_name: dict[str, Category] = {}
        by_id: dict[str, Term] = {}
        for category in categories:
            if category.name in by_name:
                raise CatalogLoadError(f"Duplicate category: {category.name}")
            by_name[category.name] = category
            for term in category.terms:
                if term.id in by_id:
                    raise CatalogLoadError(
                        f"Duplicate term id '{term.id}' in categories "
                        f"'{by_id[term.id].category}' and '{category.name}'"
                    )
                by_id[term.id] = term

        self._categories: Mapping[str, Category] = MappingProxyType(by_name)
        self._all_terms: tuple[Term, ...] = tuple(
            term for category in categories for term in category.terms
        )
        self._by_id: Mapping[str, Term] = MappingProxyType(by_id)
        self._display_names: Mapping[str, str] = MappingProxyType(
            dict(display_names or {})
        )

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def load(
        cls,
        catalog_path: Path,
        display_names_path: Path | None = None,
    ) -> CatalogStore:
        """
        Load and validate the catalog definition.

        Args:
            catalog_path: Path to the catalog JSON file.
            display_names_path: Optional YAML file of category display names.

        Returns:
            A fully validated, immutable CatalogStore.

        Raises:
            CatalogLoadError: If either file is missing or malformed, or any
                term fails validation.
        """
        raw = _read_json(catalog_path)
        categories = _parse_categories(raw, catalog_path)
        display_names = _read_display_names(display_names_path) if display_names_path else {}

        store = cls(categories, display_names)
        logger.info(
            "catalog_loaded",
            path=str(catalog_path),
            categories=len(store._categories),
            terms=len(store._all_terms),
        )
        return store

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def all_terms(self) -> tuple[Term, ...]:
        """Every term, in category declaration order then per-category order."""
        return self._all_terms

    def terms_of(self, category_name: str) -> tuple[Term, ...]:
        """Terms of one category, or an empty tuple for an unknown name."""
        category = self._categories.get(category_name)
        return category.terms if category is not None else ()

    def category_names(self) -> list[str]:
        """Category ids in declaration order."""
        return list(self._categories)

    def get_term(self, term_id: str) -> Term | None:
        """Exact id lookup."""
        return self._by_id.get(term_id)

    def display_name(self, category_name: str) -> str:
        """Display label for a category, falling back to its raw id."""
        return self._display_names.get(category_name, category_name)

    def categories(self) -> list[CategorySummary]:
        """Category listing with term counts, in declaration order."""
        return [
            CategorySummary(
                id=name,
                name=name,
                count=len(category.terms),
                display_name=self.display_name(name),
            )
            for name, category in self._categories.items()
        ]

    def __len__(self) -> int:
        """Return the number of terms in the catalog."""
        return len(self._all_terms)

    def __contains__(self, term_id: object) -> bool:
        """Check if a term id exists in the catalog."""
        return term_id in self._by_id


# =============================================================================
# Parsing helpers
# =============================================================================


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise CatalogLoadError(f"Catalog file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Invalid JSON in catalog {path}: {e}") from e


def _parse_categories(raw: Any, source: Path) -> list[Category]:
    if not isinstance(raw, dict) or not isinstance(raw.get("categories"), list):
        raise CatalogLoadError(f"Catalog {source} must contain a 'categories' list")

    categories: list[Category] = []
    for index, entry in enumerate(raw["categories"]):
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise CatalogLoadError(f"Category #{index} in {source} has no name")
        name = entry["name"]
        raw_terms = entry.get("terms")
        if not isinstance(raw_terms, list):
            raise CatalogLoadError(f"Category '{name}' in {source} has no terms list")

        terms: list[Term] = []
        for position, raw_term in enumerate(raw_terms):
            if not isinstance(raw_term, dict):
                raise CatalogLoadError(f"Term #{position} of '{name}' is not an object")
            try:
                terms.append(Term.model_validate({**raw_term, "category": name}))
            except ValidationError as e:
                term_ref = raw_term.get("id", f"#{position}")
                raise CatalogLoadError(
                    f"Invalid term {term_ref} in category '{name}': {e}"
                ) from e
        categories.append(Category(name=name, terms=tuple(terms)))

    return categories


def _read_display_names(path: Path) -> dict[str, str]:
    if not path.exists():
        raise CatalogLoadError(f"Display names file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"Invalid YAML in display names {path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogLoadError(f"Display names {path} must be a mapping")
    return {str(key): str(value) for key, value in data.items()}
