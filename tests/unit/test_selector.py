"""Tests for destination selection (preference and algorithmic modes)."""

import numpy as np
import pytest

from services.catalog import DestinationCatalog, default_catalog
from services.selector import (
    best_destination_combination,
    max_destinations,
    pick_diverse,
    select_destinations,
)


@pytest.mark.parametrize(
    "budget, days, expected",
    [
        (100000, 5, 3),
        (50000, 5, 2),
        (49999, 5, 1),
        (20000, 10, 2),
        (60000, 10, 3),
        (150000, 12, 3),
    ],
)
def test_max_destinations_from_budget_and_length(budget: int, days: int, expected: int) -> None:
    assert max_destinations(budget, days) == expected


class TestPreferenceMode:
    def test_valid_preferences_returned_unmodified(self, make_params) -> None:
        params = make_params(destination_preferences=["goa", "jaipur"], days=6)

        assert select_destinations(params, default_catalog()) == ["goa", "jaipur"]

    def test_preferences_capped_by_trip_length(self, make_params) -> None:
        prefs = ["goa", "jaipur", "munnar", "hampi", "kochi"]
        params = make_params(destination_preferences=prefs, days=2)

        assert select_destinations(params, default_catalog()) == ["goa"]

    def test_unknown_ids_are_dropped(self, make_params) -> None:
        params = make_params(destination_preferences=["atlantis", "goa", "el-dorado"], days=4)

        assert select_destinations(params, default_catalog()) == ["goa"]

    def test_duplicate_ids_collapse(self, make_params) -> None:
        params = make_params(destination_preferences=["goa", "goa", "jaipur"], days=6)

        assert select_destinations(params, default_catalog()) == ["goa", "jaipur"]

    def test_all_unknown_falls_back_to_algorithm(self, make_params, small_catalog, fixed_random) -> None:
        params = make_params(
            destination_preferences=["atlantis"], total_budget=120000, days=5, persons=2
        )

        assert select_destinations(params, small_catalog, fixed_random) == ["alpha", "charlie", "delta"]


class TestAlgorithmicMode:
    def test_experience_oriented_ranks_by_popularity_one_per_region(
        self, small_catalog, fixed_random
    ) -> None:
        # Bravo shares Alpha's region, so the region-diverse pass skips it
        result = best_destination_combination(120000, 5, 2, small_catalog, rng=fixed_random)

        assert result == ["alpha", "charlie", "delta"]

    def test_budget_oriented_ranks_by_cost(self, small_catalog, fixed_random) -> None:
        result = best_destination_combination(20000, 2, 1, small_catalog, rng=fixed_random)

        assert result == ["bravo"]

    def test_long_trip_raises_cap(self, small_catalog, fixed_random) -> None:
        result = best_destination_combination(20000, 10, 1, small_catalog, rng=fixed_random)

        assert result == ["bravo", "delta"]

    def test_backfills_when_regions_run_out(self, make_dest, fixed_random) -> None:
        catalog = DestinationCatalog([
            make_dest("alpha", "North", 1.0, 9),
            make_dest("bravo", "North", 0.8, 8),
        ])

        result = best_destination_combination(60000, 5, 1, catalog, rng=fixed_random)

        assert result == ["alpha", "bravo"]

    def test_starting_location_excluded_case_insensitively(self, small_catalog, fixed_random) -> None:
        result = best_destination_combination(
            120000, 5, 2, small_catalog, starting_location="  ALPHA ", rng=fixed_random
        )

        assert "alpha" not in result
        assert result == ["bravo", "charlie", "delta"]

    def test_jitter_can_reorder_popularity(self, small_catalog, make_random) -> None:
        # Bravo draws the full 30% boost: 8 * 1.3 > 9
        rng = make_random(0.0, 1.0, 0.0, 0.0)

        result = best_destination_combination(120000, 5, 2, small_catalog, rng=rng)

        assert result == ["bravo", "charlie", "delta"]

    def test_without_rng_ranking_is_unjittered(self, small_catalog) -> None:
        assert best_destination_combination(120000, 5, 2, small_catalog) == ["alpha", "charlie", "delta"]

    def test_seeded_rng_is_reproducible(self) -> None:
        catalog = default_catalog()

        first = best_destination_combination(150000, 12, 2, catalog, rng=np.random.default_rng(7))
        second = best_destination_combination(150000, 12, 2, catalog, rng=np.random.default_rng(7))

        assert first == second
        assert 1 <= len(first) <= 3

    def test_nothing_affordable_returns_cheapest(self, make_dest, fixed_random) -> None:
        catalog = DestinationCatalog([
            make_dest("pricey", "A", 5.0, 9),
            make_dest("cheapest", "B", 3.0, 5),
            make_dest("middle", "C", 4.0, 7),
        ])

        result = best_destination_combination(5000, 5, 2, catalog, rng=fixed_random)

        assert result == ["cheapest"]

    def test_cheapest_fallback_skips_starting_location(self, make_dest, fixed_random) -> None:
        catalog = DestinationCatalog([
            make_dest("pricey", "A", 5.0, 9),
            make_dest("cheapest", "B", 3.0, 5),
            make_dest("middle", "C", 4.0, 7),
        ])

        result = best_destination_combination(
            5000, 5, 2, catalog, starting_location="Cheapest", rng=fixed_random
        )

        assert result == ["middle"]

    def test_single_affordable_candidate_returned_alone(self, make_dest, fixed_random) -> None:
        catalog = DestinationCatalog([
            make_dest("pricey", "A", 5.0, 9),
            make_dest("fine", "B", 0.5, 5),
        ])

        assert best_destination_combination(50000, 5, 2, catalog, rng=fixed_random) == ["fine"]

    def test_empty_catalog_gives_empty_selection(self, fixed_random) -> None:
        assert best_destination_combination(50000, 5, 2, DestinationCatalog([]), rng=fixed_random) == []

    @pytest.mark.parametrize("budget", [5000, 25000, 50000, 100000, 400000])
    @pytest.mark.parametrize("days", [1, 3, 10])
    def test_output_respects_cap_and_catalog(self, budget: int, days: int) -> None:
        catalog = default_catalog()

        result = best_destination_combination(budget, days, 2, catalog, rng=np.random.default_rng(1))

        assert 1 <= len(result) <= max_destinations(budget, days)
        assert len(set(result)) == len(result)
        assert all(dest_id in catalog for dest_id in result)


def test_pick_diverse_prefers_new_regions(small_catalog) -> None:
    ranked = small_catalog.list_all()

    assert pick_diverse(ranked, 2) == ["alpha", "charlie"]
    assert pick_diverse(ranked, 4) == ["alpha", "charlie", "delta", "bravo"]
