"""
Shared fixtures: a small on-disk catalog and an app client bound to it.

The sample catalog mirrors the reference scenario:
- catA: a1 "closure" and a2 "hoisting", both tagged "scope"
- catB: b1 "jsx", tagged "rendering"
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from src.catalog.store import CatalogStore
from src.core.config import DEFAULT_CATALOG_PATH


def make_term(term_id: str, name: str, **overrides: Any) -> dict[str, Any]:
    """Build a raw catalog term with every required field filled in."""
    term: dict[str, Any] = {
        "id": term_id,
        "name": name,
        "localizedLabel": f"{name}-label",
        "description": f"About {name}",
        "difficulty": "intermediate",
        "tags": [],
        "example": f"// {name}",
        "useCases": [],
        "relatedTermNames": [],
    }
    term.update(overrides)
    return term


def write_catalog(
    directory: Path,
    categories: dict[str, list[dict[str, Any]]],
    filename: str = "glossary_catalog.json",
) -> Path:
    """Write a catalog JSON file and return its path."""
    path = directory / filename
    payload = {
        "categories": [
            {"name": name, "terms": terms} for name, terms in categories.items()
        ]
    }
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def bundled_term_count() -> int:
    """Number of terms in the catalog shipped under src/catalog/data."""
    raw = json.loads(DEFAULT_CATALOG_PATH.read_text(encoding="utf-8"))
    return sum(len(category["terms"]) for category in raw["categories"])


@pytest.fixture
def sample_catalog_data() -> dict[str, list[dict[str, Any]]]:
    """Raw two-category catalog used across unit tests."""
    return {
        "catA": [
            make_term(
                "a1",
                "closure",
                localizedLabel="闭包",
                description="Function bundled with its lexical environment",
                tags=["scope"],
                relatedTermNames=["hoisting"],
            ),
            make_term(
                "a2",
                "hoisting",
                localizedLabel="变量提升",
                description="Declarations move to the top of their scope",
                tags=["scope"],
            ),
        ],
        "catB": [
            make_term(
                "b1",
                "jsx",
                localizedLabel="JavaScript XML",
                description="HTML-like syntax extension",
                difficulty="beginner",
                tags=["rendering"],
            ),
        ],
    }


@pytest.fixture
def sample_catalog_path(tmp_path: Path, sample_catalog_data: dict) -> Path:
    """Sample catalog written to a temporary file."""
    return write_catalog(tmp_path, sample_catalog_data)


@pytest.fixture
def display_names_path(tmp_path: Path) -> Path:
    """Display names for catA only; catB falls back to its id."""
    path = tmp_path / "category_display_names.yaml"
    path.write_text("catA: Category A\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_store(sample_catalog_path: Path, display_names_path: Path) -> CatalogStore:
    """Loaded CatalogStore for the sample catalog."""
    return CatalogStore.load(sample_catalog_path, display_names_path)


@pytest.fixture
def client(sample_store: CatalogStore) -> Iterator[TestClient]:
    """Test client whose app serves the sample catalog (lifespan not run)."""
    from src.main import app

    app.state.catalog = sample_store
    yield TestClient(app, raise_server_exceptions=False)
    app.state.catalog = None


@pytest.fixture
def term_factory() -> Callable[..., dict[str, Any]]:
    """Expose make_term to tests."""
    return make_term


@pytest.fixture
def catalog_factory(tmp_path: Path) -> Callable[[dict[str, list[dict[str, Any]]]], Path]:
    """Write an ad-hoc catalog into tmp_path and return its path."""

    def _write(categories: dict[str, list[dict[str, Any]]]) -> Path:
        return write_catalog(tmp_path, categories, filename="adhoc_catalog.json")

    return _write
