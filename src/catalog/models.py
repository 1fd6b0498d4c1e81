"""
Catalog Models

Immutable records for the glossary catalog and their wire projections.

Python attributes are snake_case; JSON on the wire is camelCase via the
shared alias generator, so ``Term.localized_label`` is ``localizedLabel``.

Anti-Patterns Avoided:
- Free-form difficulty strings: parsed into Difficulty at load time
- Mutable shared state: every catalog model is frozen
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# =============================================================================
# Enums & Constants
# =============================================================================


class Difficulty(str, Enum):
    """Closed difficulty scale for a term."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


DIFFICULTY_LEVELS: Final[tuple[str, ...]] = tuple(d.value for d in Difficulty)

# Sentinel accepted by the category and difficulty filters
ALL_FILTER: Final[str] = "all"


# =============================================================================
# Base Model
# =============================================================================


class CamelModel(BaseModel):
    """Frozen model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# Catalog Records
# =============================================================================


class Term(CamelModel):
    """A single glossary entry.

    Attributes:
        id: Unique id across the whole catalog.
        name: Canonical English identifier of the concept.
        localized_label: Human-readable label in a second language.
        description: Free text.
        difficulty: Beginner, intermediate or advanced.
        tags: Labels used for search and relatedness; duplicates collapse.
        example: Opaque code sample, never parsed.
        use_cases: Ordered usage notes.
        related_term_names: Free-text hints that may or may not name
            another term.
        category: Id of the category that declares this term.
    """

    id: str = Field(min_length=1)
    name: str
    localized_label: str
    description: str
    difficulty: Difficulty
    tags: tuple[str, ...]
    example: str
    use_cases: tuple[str, ...]
    related_term_names: tuple[str, ...]
    category: str

    @field_validator("tags")
    @classmethod
    def collapse_duplicate_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Drop repeated tags, keeping first-seen order for stable output."""
        return tuple(dict.fromkeys(v))

    def shares_tag_with(self, other: Term) -> bool:
        """Whether the two terms have at least one tag in common."""
        return not set(self.tags).isdisjoint(other.tags)


class Category(CamelModel):
    """A named, ordered grouping of terms."""

    name: str
    terms: tuple[Term, ...]


# =============================================================================
# Projections
# =============================================================================


class RelatedTerm(CamelModel):
    """Slim projection of a term used in detail responses."""

    id: str
    name: str
    localized_label: str

    @classmethod
    def from_term(cls, term: Term) -> RelatedTerm:
        return cls(id=term.id, name=term.name, localized_label=term.localized_label)


class TermDetail(Term):
    """A full term plus its computed related terms."""

    related_terms: list[RelatedTerm]


class CategorySummary(CamelModel):
    """Category listing entry: ``{id, name, count, displayName}``."""

    id: str
    name: str
    count: int
    display_name: str


class TermListResult(CamelModel):
    """One page of a term query."""

    terms: list[Term]
    total: int
    has_more: bool
    categories: list[str]
    difficulties: list[str] = Field(default_factory=lambda: list(DIFFICULTY_LEVELS))


class CatalogStats(CamelModel):
    """Point-in-time snapshot of catalog composition."""

    total_terms: int
    category_count: int = Field(alias="categories")
    by_difficulty: dict[str, int]
    by_category: dict[str, int]
    generated_at: datetime = Field(alias="lastUpdated")
