from fastapi import APIRouter, HTTPException, Query
from typing import List, Optional
import numpy as np
from config import RANDOM_SEED
from models.schemas import Destination, DestinationRecommendation, RecommendedDestinations
from services.affordability import daily_budget_per_person, score_affordability
from services.catalog import default_catalog
from services.selector import best_destination_combination, max_destinations

router = APIRouter(prefix="/destinations", tags=["destinations"])


@router.get("/", response_model=List[Destination])
def list_destinations(region: Optional[str] = None, category: Optional[str] = None):
    """Return all destinations, optionally filtered by region and/or category."""
    catalog      = default_catalog()
    destinations = catalog.by_region(region) if region else catalog.list_all()
    if category:
        in_category  = catalog.by_category(category)
        destinations = [d for d in destinations if d in in_category]
    return destinations


@router.get("/regions", response_model=List[str])
def list_regions():
    return default_catalog().regions()


@router.get("/recommended", response_model=RecommendedDestinations)
def recommended_destinations(
    budget:            int = Query(gt=0),
    days:              int = Query(ge=1),
    persons:           int = Query(ge=1),
    starting_location: str = ""
):
    """
    Best destination combination for a budget, with the affordability tier
    of each pick. Same selection the planner uses when no preferences are given.
    """
    catalog = default_catalog()
    daily   = daily_budget_per_person(budget, days, persons)
    ids     = best_destination_combination(
        budget, days, persons, catalog,
        starting_location=starting_location,
        rng=np.random.default_rng(RANDOM_SEED)
    )
    picks = [catalog.by_id(dest_id) for dest_id in ids]
    return RecommendedDestinations(
        daily_budget_per_person=round(daily, 2),
        max_destinations=max_destinations(budget, days),
        destinations=[
            DestinationRecommendation(destination=d, affordability=score_affordability(d, daily))
            for d in picks
        ]
    )


@router.get("/{destination_id}", response_model=Destination)
def get_destination(destination_id: str):
    """Get details for a specific destination."""
    dest = default_catalog().by_id(destination_id)
    if dest is None:
        raise HTTPException(status_code=404, detail=f"Destination '{destination_id}' not found")
    return dest
