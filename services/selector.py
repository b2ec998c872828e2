# Destination Selector — pick which destinations a trip visits
#
# Two modes:
#   1. Preference mode:  caller-chosen ids, filtered to the catalog and
#                         capped at ceil(days / 2)
#   2. Algorithmic mode: best combination of affordable destinations:
#        a. cap from budget tiers (+1 for long trips, max 3)
#        b. drop luxury-tier destinations and the starting location
#        c. nothing affordable → single cheapest destination
#        d. rank: budget-oriented (< 30000) by cost, else by popularity,
#           popularity jittered by up to 30% via the injected rng
#        e. one destination per region first, then backfill

import logging
import math
from typing import List
from config import (
    BUDGET_ORIENTED_THRESHOLD,
    DESTINATION_CAP_TIERS,
    LONG_TRIP_DAYS,
    MAX_DESTINATIONS,
    POPULARITY_JITTER,
)
from models.schemas import Destination, TripParams
from services.affordability import daily_budget_per_person, is_affordable
from services.catalog import DestinationCatalog

logger = logging.getLogger(__name__)


def max_destinations(total_budget: float, days: int) -> int:
    cap = 1
    for min_budget, tier_cap in DESTINATION_CAP_TIERS:
        if total_budget >= min_budget:
            cap = tier_cap
            break

    if days >= LONG_TRIP_DAYS:
        cap = min(cap + 1, MAX_DESTINATIONS)
    return cap


def preferred_destinations(preferences: List[str], days: int, catalog: DestinationCatalog) -> List[str]:
    """Valid preference ids in input order, capped at ceil(days / 2). Empty if none are valid."""
    valid = [dest_id for dest_id in dict.fromkeys(preferences) if dest_id in catalog]
    return valid[:min(len(valid), math.ceil(days / 2))]


def _jittered_popularity(candidates: List[Destination], rng) -> dict:
    # One draw per candidate, in catalog order, so a seeded rng replays exactly
    if rng is None:
        return {d.id: float(d.popularity) for d in candidates}
    return {
        d.id: d.popularity * (1 + float(rng.random()) * POPULARITY_JITTER)
        for d in candidates
    }


def rank_candidates(candidates: List[Destination], total_budget: float, rng) -> List[Destination]:
    popularity = _jittered_popularity(candidates, rng)

    if total_budget < BUDGET_ORIENTED_THRESHOLD:
        key = lambda d: (d.cost_factor, -popularity[d.id])
    else:
        key = lambda d: (-popularity[d.id], d.cost_factor)
    return sorted(candidates, key=key)


def pick_diverse(ranked: List[Destination], limit: int) -> List[str]:
    """One destination per region first, then backfill in rank order."""
    selected = []
    regions  = set()

    for dest in ranked:
        if len(selected) >= limit:
            break
        if dest.region in regions:
            continue
        selected.append(dest.id)
        regions.add(dest.region)

    for dest in ranked:
        if len(selected) >= limit:
            break
        if dest.id not in selected:
            selected.append(dest.id)

    return selected


def best_destination_combination(
    total_budget:      float,
    days:              int,
    persons:           int,
    catalog:           DestinationCatalog,
    starting_location: str = "",
    rng=None,
) -> List[str]:
    daily = daily_budget_per_person(total_budget, days, persons)
    limit = max_destinations(total_budget, days)

    origin   = catalog.find_by_name(starting_location)
    eligible = [d for d in catalog if origin is None or d.id != origin.id]

    candidates = [d for d in eligible if is_affordable(d, daily)]

    if not candidates:
        if not eligible:
            logger.info("Catalog has no destination besides the starting location")
            return []
        cheapest = min(eligible, key=lambda d: d.cost_factor)
        logger.info("No affordable destination at %.0f/day, falling back to '%s'", daily, cheapest.id)
        return [cheapest.id]

    if len(candidates) == 1:
        return [candidates[0].id]

    ranked = rank_candidates(candidates, total_budget, rng)
    return pick_diverse(ranked, limit)


def select_destinations(params: TripParams, catalog: DestinationCatalog, rng=None) -> List[str]:
    if params.destination_preferences:
        chosen = preferred_destinations(params.destination_preferences, params.days, catalog)
        if chosen:
            logger.debug("Using %d preferred destination(s)", len(chosen))
            return chosen
        logger.info("No valid destination preferences in %s, selecting automatically",
                    params.destination_preferences)

    return best_destination_combination(
        params.total_budget,
        params.days,
        params.persons,
        catalog,
        starting_location=params.starting_location,
        rng=rng,
    )
