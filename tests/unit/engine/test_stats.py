"""
Tests for the Statistics Aggregator.
"""

from __future__ import annotations

from datetime import datetime, timezone

from src.catalog.store import CatalogStore
from src.engine.stats import compute_stats

FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class TestComputeStats:

    def test_counts(self, sample_store: CatalogStore) -> None:
        stats = compute_stats(sample_store, now=FIXED_NOW)

        assert stats.total_terms == 3
        assert stats.category_count == 2
        assert stats.by_difficulty == {"beginner": 1, "intermediate": 2, "advanced": 0}
        assert stats.by_category == {"catA": 2, "catB": 1}
        assert stats.generated_at == FIXED_NOW

    def test_difficulty_buckets_sum_to_total(self, sample_store: CatalogStore) -> None:
        stats = compute_stats(sample_store)
        assert sum(stats.by_difficulty.values()) == stats.total_terms

    def test_repeated_calls_agree(self, sample_store: CatalogStore) -> None:
        first = compute_stats(sample_store, now=FIXED_NOW)
        second = compute_stats(sample_store, now=FIXED_NOW)
        assert first == second

    def test_timestamp_is_taken_per_call(self, sample_store: CatalogStore) -> None:
        before = datetime.now(timezone.utc)
        stats = compute_stats(sample_store)
        assert stats.generated_at >= before
        assert stats.generated_at.tzinfo is not None

    def test_wire_keys(self, sample_store: CatalogStore) -> None:
        payload = compute_stats(sample_store, now=FIXED_NOW).model_dump(
            mode="json", by_alias=True
        )

        assert set(payload) == {
            "totalTerms",
            "categories",
            "byDifficulty",
            "byCategory",
            "lastUpdated",
        }
        assert payload["categories"] == 2
        assert payload["lastUpdated"].startswith("2026-01-02T03:04:05")
