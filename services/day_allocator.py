# Day Allocator — split trip days across selected destinations
#
#   transit days   = one between each pair of consecutive destinations
#   effective days = total days - transit days (never below 0)
#   priority order = popularity DESC, catalog order on ties
#
# Every destination but the last in priority order gets
#   max(1, floor(effective * popularity/10 * 1.5/count))
# capped at what is left; the last one takes the remainder.

import logging
import math
from functools import reduce
from typing import Dict, List, Tuple
from services.catalog import DestinationCatalog

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 5


def transit_days_needed(count: int) -> int:
    return max(0, count - 1)


def effective_days(total_days: int, count: int) -> int:
    return max(0, total_days - transit_days_needed(count))


def _priority(destination_id: str, catalog: DestinationCatalog) -> int:
    dest = catalog.by_id(destination_id)
    return dest.popularity if dest else DEFAULT_PRIORITY


def prioritize(selected: List[str], catalog: DestinationCatalog) -> List[str]:
    """Selected ids ordered by popularity, highest first, ties in catalog order."""
    return sorted(selected, key=lambda dest_id: (-_priority(dest_id, catalog), catalog.position(dest_id)))


def allocate_days(selected: List[str], total_days: int, catalog: DestinationCatalog) -> Dict[str, int]:
    if not selected:
        return {}

    count     = len(selected)
    available = effective_days(total_days, count)
    ordered   = prioritize(selected, catalog)
    last      = len(ordered) - 1

    def assign(acc: Tuple[Dict[str, int], int], item: Tuple[int, str]) -> Tuple[Dict[str, int], int]:
        allocated, remaining = acc
        index, dest_id       = item

        if index == last:
            days = remaining
        else:
            share = math.floor(available * (_priority(dest_id, catalog) / 10) * (1.5 / count))
            days  = min(remaining, max(1, share))

        return {**allocated, dest_id: days}, max(0, remaining - days)

    allocation, remaining = reduce(assign, enumerate(ordered), ({}, available))

    # Hand out any leftover one day at a time in selection order
    for i in range(remaining):
        dest_id = selected[i % count]
        allocation = {**allocation, dest_id: allocation.get(dest_id, 0) + 1}

    if available < count:
        logger.info("Only %d stay day(s) for %d destinations; some get none", available, count)

    return allocation
