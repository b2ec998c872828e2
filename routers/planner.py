from fastapi import APIRouter, HTTPException
from models.schemas import TripParams, TripPlanResponse
from services.planner import plan_trip, summary_payload, validate_trip_params
from services.llm_service import generate_summary

router = APIRouter(prefix="/plan", tags=["planner"])


@router.post("/generate", response_model=TripPlanResponse)
def generate(params: TripParams, summary: bool = False):
    """
    Generate a full trip plan: destinations, budget breakdown,
    recommendations, transport/hotel/restaurant options and itinerary.
    Pass ?summary=true for a natural-language summary.
    """
    errors = validate_trip_params(params)
    if errors:
        raise HTTPException(status_code=422, detail=errors)

    plan = plan_trip(params)
    return TripPlanResponse(
        plan=plan,
        summary=generate_summary(summary_payload(plan)) if summary else None
    )
