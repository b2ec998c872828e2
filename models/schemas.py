from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Literal

DestinationCategory = Literal["beach", "mountain", "city", "wildlife", "historical", "spiritual"]
FoodPreference      = Literal["vegetarian", "non-vegetarian", "no-preference"]
TransportMode       = Literal["flight", "train", "bus", "any"]
AffordabilityTier   = Literal["budget", "moderate", "luxury"]


class Destination(BaseModel):
    model_config = ConfigDict(frozen=True)

    id:          str
    name:        str
    region:      str
    category:    DestinationCategory
    cost_factor: float = Field(gt=0)
    popularity:  int   = Field(ge=1, le=10)
    description: str   = ""


class TripParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_budget:            int = Field(gt=0)
    days:                    int = Field(ge=1)
    persons:                 int = Field(ge=1)
    start_date:              date
    starting_location:       str = ""
    destination_preferences: List[str] = []
    food_preference:         FoodPreference = "no-preference"
    explore_local_food:      bool = True
    transport_mode:          TransportMode = "any"


class BudgetBreakdown(BaseModel):
    travel:        int
    accommodation: int
    food:          int
    activities:    int
    miscellaneous: int
    total:         int

    def parts_sum(self) -> int:
        return self.travel + self.accommodation + self.food + self.activities + self.miscellaneous


class BudgetRecommendation(BaseModel):
    name:        str
    cost:        int
    description: str


class FlightOption(BaseModel):
    airline:        str
    departure_time: str
    arrival_time:   str
    duration:       str
    cost:           int
    stops:          int


class TransportOption(BaseModel):
    operator:       str
    departure_time: str
    arrival_time:   str
    duration:       str
    cost:           int
    stops:          int
    type:           Literal["train", "bus"]
    travel_class:   Optional[str] = None
    amenities:      List[str] = []


class HotelOption(BaseModel):
    name:                     str
    chain:                    str
    price_per_night:          int
    rating:                   int = Field(ge=1, le=5)
    amenities:                List[str]
    distance_from_attraction: str
    destination_id:           str


class RestaurantRecommendation(BaseModel):
    name:          str
    cuisine:       str
    price_range:   str
    rating:        float
    is_vegetarian: bool
    special_dish:  Optional[str] = None
    location:      str


class TripDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    day_number:     int
    date:           date
    destination:    str
    is_transit_day: bool = False
    activities:     List[str]
    accommodation:  str
    meals:          List[str]


class TripPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    trip_id:                      str
    params:                       TripParams
    destinations:                 List[str]
    budget_breakdown:             BudgetBreakdown
    travel_recommendations:       List[BudgetRecommendation] = []
    accommodation_recommendations: List[BudgetRecommendation] = []
    food_recommendations:         List[BudgetRecommendation] = []
    misc_recommendations:         List[BudgetRecommendation] = []
    flight_options:               List[FlightOption] = []
    train_options:                List[TransportOption] = []
    bus_options:                  List[TransportOption] = []
    hotel_options:                List[HotelOption] = []
    restaurant_recommendations:   List[RestaurantRecommendation] = []
    itinerary:                    List[TripDay]
    created_at:                   datetime


class TripPlanResponse(BaseModel):
    plan:    TripPlan
    summary: Optional[str] = None


class DestinationRecommendation(BaseModel):
    destination:   Destination
    affordability: AffordabilityTier


class RecommendedDestinations(BaseModel):
    daily_budget_per_person: float
    max_destinations:        int
    destinations:            List[DestinationRecommendation]
