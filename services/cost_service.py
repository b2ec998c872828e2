# Cost Service — trip-level budget split
# Picks a percentage table by trip length, scales each category by the
# average destination cost factor, then reconciles rounding so the five
# categories sum to exactly the traveler's budget.

import logging
import math
from typing import Dict, List
from config import BUDGET_SPLITS, SHORT_TRIP_MAX_DAYS, LONG_TRIP_MIN_DAYS
from models.schemas import BudgetBreakdown, TripParams
from services.catalog import DestinationCatalog

logger = logging.getLogger(__name__)

CATEGORIES = ("travel", "accommodation", "food", "activities", "miscellaneous")


def round_half_up(amount: float) -> int:
    """Nearest integer with .5 going up; amounts here are never negative."""
    return math.floor(amount + 0.5)


def budget_split(days: int) -> Dict[str, float]:
    if days >= LONG_TRIP_MIN_DAYS:
        return BUDGET_SPLITS["long"]
    if days <= SHORT_TRIP_MAX_DAYS:
        return BUDGET_SPLITS["short"]
    return BUDGET_SPLITS["default"]


def aggregate_cost_factor(destination_ids: List[str], catalog: DestinationCatalog) -> float:
    """Mean cost factor of the ids found in the catalog, 1.0 if none resolve."""
    factors = [d.cost_factor for d in map(catalog.by_id, destination_ids) if d is not None]
    if not factors:
        return 1.0
    return sum(factors) / len(factors)


def _reconcile(amounts: Dict[str, int], total: int) -> Dict[str, int]:
    diff = total - sum(amounts.values())
    if diff == 0:
        return amounts

    absorber   = "travel" if amounts["travel"] > amounts["accommodation"] else "accommodation"
    reconciled = dict(amounts)
    reconciled[absorber] += diff

    if reconciled[absorber] >= 0:
        return reconciled

    # Deficit larger than the absorbing category: clamp it at zero and take
    # the rest from the other categories, largest first
    shortfall = -reconciled[absorber]
    reconciled[absorber] = 0
    for name in sorted(CATEGORIES, key=lambda c: -reconciled[c]):
        if shortfall == 0:
            break
        taken = min(shortfall, reconciled[name])
        reconciled[name] -= taken
        shortfall -= taken

    logger.warning("Cost factor pushed budget parts to %d over a %d total; spilled deficit across categories",
                   sum(amounts.values()), total)
    return reconciled


def allocate_budget(params: TripParams, cost_factor: float = 1.0) -> BudgetBreakdown:
    total  = params.total_budget
    split  = budget_split(params.days)

    amounts = {name: round_half_up(total * split[name] * cost_factor) for name in CATEGORIES}
    amounts = _reconcile(amounts, total)

    return BudgetBreakdown(total=total, **amounts)
