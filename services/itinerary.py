# Itinerary Builder — one TripDay per calendar day
# Walks destinations in priority order with a single day counter and date
# cursor: a transit day before every destination except the first, then
# that destination's stay days. No backtracking.

from datetime import timedelta
from typing import Dict, List
from models.schemas import TripDay, TripParams
from services.catalog import DestinationCatalog


def _display_name(destination_id: str, catalog: DestinationCatalog, fallback: str) -> str:
    dest = catalog.by_id(destination_id)
    return dest.name if dest else fallback


def build_itinerary(
    params:                   TripParams,
    prioritized:              List[str],
    days_per_destination:     Dict[str, int],
    accommodation_per_night:  float,
    catalog:                  DestinationCatalog,
    labels,
) -> List[TripDay]:
    """
    Steps per destination:
      1. Transit day from the previous destination (multi-destination trips only)
      2. days_per_destination[id] stay days, activities keyed by day-in-stay
    Day numbers run 1..N and dates start at params.start_date, one day apart.
    """
    itinerary = []
    day_number = 1
    previous   = None

    def make_day(**fields) -> TripDay:
        return TripDay(
            day_number=day_number,
            date=params.start_date + timedelta(days=day_number - 1),
            **fields
        )

    for dest_id in prioritized:
        if previous is not None and len(prioritized) > 1:
            from_name = _display_name(previous, catalog, "previous location")
            to_name   = _display_name(dest_id, catalog, "next location")
            itinerary.append(make_day(
                destination    = f"Travel from {from_name} to {to_name}",
                is_transit_day = True,
                activities     = [f"Travel to {_display_name(dest_id, catalog, dest_id)}"],
                accommodation  = labels.accommodation(dest_id, accommodation_per_night),
                meals          = labels.meals(params.food_preference, params.explore_local_food)
            ))
            day_number += 1

        for stay_day in range(1, days_per_destination.get(dest_id, 0) + 1):
            itinerary.append(make_day(
                destination   = dest_id,
                activities    = labels.activities(dest_id, stay_day),
                accommodation = labels.accommodation(dest_id, accommodation_per_night),
                meals         = labels.meals(params.food_preference, params.explore_local_food)
            ))
            day_number += 1

        previous = dest_id

    return itinerary
