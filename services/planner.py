# Planner — main orchestrator
# Coordinates: destination selection → budget split → recommendations →
# transport/hotel/restaurant options → day allocation → itinerary

import logging
import math
import uuid
from datetime import datetime, timezone
from typing import List, Optional
import numpy as np
from config import MIN_TOTAL_BUDGET, RANDOM_SEED
from models.schemas import TripParams, TripPlan
from services.catalog import DestinationCatalog, default_catalog
from services.cost_service import aggregate_cost_factor, allocate_budget
from services.day_allocator import allocate_days, prioritize
from services.itinerary import build_itinerary
from services.labels import ItineraryLabels
from services.options import bus_options, flight_options, hotel_options, train_options
from services.recommendations import (
    accommodation_recommendations,
    food_recommendations,
    miscellaneous_recommendations,
    travel_recommendations,
)
from services.restaurants import restaurant_recommendations
from services.selector import select_destinations

logger = logging.getLogger(__name__)

HOTELS_PER_DESTINATION = 2


def validate_trip_params(params: TripParams) -> List[str]:
    """Caller-facing checks; the planner itself assumes these pass."""
    errors = []
    if params.total_budget < MIN_TOTAL_BUDGET:
        errors.append(f"Budget must be at least ₹{MIN_TOTAL_BUDGET:,}")
    if params.days < 1:
        errors.append("Trip must be at least 1 day")
    if params.persons < 1:
        errors.append("Number of travelers must be at least 1")
    if not params.starting_location.strip():
        errors.append("Please enter your starting location")
    return errors


def fit_to_trip_length(selected: List[str], days: int) -> List[str]:
    """Keep at most ceil(days / 2) destinations so each one gets a stay day."""
    return selected[:math.ceil(days / 2)]


def plan_trip(
    params:  TripParams,
    catalog: Optional[DestinationCatalog] = None,
    rng=None,
    labels=None,
) -> TripPlan:
    """
    Full pipeline:
      1. Select destinations (preferences or best affordable combination)
      2. Split the budget, scaled by the average destination cost factor
      3. Budget recommendations + synthetic transport/hotel/restaurant options
      4. Allocate days by destination popularity, one transit day between stops
      5. Build the day-by-day itinerary
    """
    catalog = catalog if catalog is not None else default_catalog()
    rng     = rng if rng is not None else np.random.default_rng(RANDOM_SEED)
    labels  = labels if labels is not None else ItineraryLabels(catalog, rng)

    # 1. Destinations
    selected = fit_to_trip_length(select_destinations(params, catalog, rng), params.days)
    if not selected:
        logger.warning("No destinations available; returning an empty itinerary")

    # 2. Budget
    cost_factor = aggregate_cost_factor(selected, catalog)
    budget      = allocate_budget(params, cost_factor)

    # 3. Recommendations and options
    first      = catalog.by_id(selected[0]) if selected else None
    first_name = first.name if first else "destination"
    mode       = params.transport_mode
    route      = (budget.travel, params.starting_location, first_name, params.persons, rng)

    hotels = []
    for dest_id in selected:
        dest = catalog.by_id(dest_id)
        if dest:
            hotels += hotel_options(dest, budget.accommodation, params.days, params.persons, rng,
                                    max_options=HOTELS_PER_DESTINATION)

    # 4. Days
    prioritized   = prioritize(selected, catalog)
    days_per_stop = allocate_days(selected, params.days, catalog)

    # 5. Itinerary
    itinerary = build_itinerary(
        params,
        prioritized,
        days_per_stop,
        budget.accommodation / params.days,
        catalog,
        labels,
    )

    logger.info("Planned %d-day trip to %s (%d itinerary days, cost factor %.2f)",
                params.days, selected, len(itinerary), cost_factor)

    return TripPlan(
        trip_id=str(uuid.uuid4()),
        params=params,
        destinations=selected,
        budget_breakdown=budget,
        travel_recommendations=travel_recommendations(
            budget.travel, params.persons, cost_factor, selected, catalog),
        accommodation_recommendations=accommodation_recommendations(
            budget.accommodation, params.days, params.persons, cost_factor, selected, catalog),
        food_recommendations=food_recommendations(
            budget.food, params.days, params.persons, cost_factor,
            params.food_preference, params.explore_local_food),
        misc_recommendations=miscellaneous_recommendations(
            budget.miscellaneous, params.persons, cost_factor),
        flight_options=flight_options(*route) if mode in ("flight", "any") else [],
        train_options=train_options(*route) if mode in ("train", "any") else [],
        bus_options=bus_options(*route) if mode in ("bus", "any") else [],
        hotel_options=hotels,
        restaurant_recommendations=restaurant_recommendations(
            selected, params.food_preference, budget.food, params.persons, catalog),
        itinerary=itinerary,
        created_at=datetime.now(timezone.utc)
    )


def summary_payload(plan: TripPlan, catalog: Optional[DestinationCatalog] = None) -> dict:
    """Compact view of a plan for the LLM summary."""
    catalog = catalog if catalog is not None else default_catalog()
    names   = [d.name for d in map(catalog.by_id, plan.destinations) if d is not None]
    return {
        "destinations":      plan.destinations,
        "destination_names": names,
        "days":              plan.params.days,
        "persons":           plan.params.persons,
        "total_budget":      plan.budget_breakdown.total,
        "budget":            plan.budget_breakdown.model_dump(),
        "itinerary": [
            {"day": d.day_number, "destination": d.destination, "activities": d.activities}
            for d in plan.itinerary
        ],
    }
