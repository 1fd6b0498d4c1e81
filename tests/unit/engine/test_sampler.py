"""
Tests for the Random Sampler.
"""

from __future__ import annotations

import random

import pytest

from src.catalog.store import CatalogStore
from src.engine.sampler import sample_terms


class TestSampleTerms:

    @pytest.mark.parametrize("count", [1, 2, 3])
    def test_length_and_uniqueness(self, sample_store: CatalogStore, count: int) -> None:
        result = sample_terms(sample_store, count, rng=random.Random(7))

        assert len(result) == count
        assert len({t.id for t in result}) == count

    @pytest.mark.parametrize("count", [0, -1, -50])
    def test_non_positive_count_is_empty(self, sample_store: CatalogStore, count: int) -> None:
        assert sample_terms(sample_store, count) == []

    def test_count_above_total_returns_whole_catalog(self, sample_store: CatalogStore) -> None:
        result = sample_terms(sample_store, 100, rng=random.Random(1))

        assert sorted(t.id for t in result) == ["a1", "a2", "b1"]

    def test_seeded_rng_is_deterministic(self, sample_store: CatalogStore) -> None:
        first = sample_terms(sample_store, 3, rng=random.Random(42))
        second = sample_terms(sample_store, 3, rng=random.Random(42))
        assert [t.id for t in first] == [t.id for t in second]

    def test_catalog_order_is_untouched(self, sample_store: CatalogStore) -> None:
        sample_terms(sample_store, 3, rng=random.Random(3))
        assert [t.id for t in sample_store.all_terms()] == ["a1", "a2", "b1"]

    def test_every_term_can_lead(self, sample_store: CatalogStore) -> None:
        rng = random.Random(0)
        leaders = {sample_terms(sample_store, 1, rng=rng)[0].id for _ in range(200)}
        assert leaders == {"a1", "a2", "b1"}
