# Budget recommendations — what each budget category can buy
# Tiers are picked from per-person amounts; every cost is scaled by the
# trip's average destination cost factor.

from typing import List, Optional
from models.schemas import BudgetRecommendation
from services.catalog import DestinationCatalog
from services.cost_service import round_half_up


def _rec(name: str, base_cost: float, cost_factor: float, description: str) -> BudgetRecommendation:
    return BudgetRecommendation(name=name, cost=round_half_up(base_cost * cost_factor), description=description)


def _first_category(destinations: List[str], catalog: DestinationCatalog) -> Optional[str]:
    if not destinations:
        return None
    dest = catalog.by_id(destinations[0])
    return dest.category if dest else None


def travel_recommendations(
    travel_budget: float,
    persons:       int,
    cost_factor:   float,
    destinations:  List[str],
    catalog:       DestinationCatalog
) -> List[BudgetRecommendation]:
    per_person = travel_budget / persons

    if per_person < 5000:
        recs = [
            _rec("Public Transport", 1500, cost_factor, "Use local buses and trains for intercity travel"),
            _rec("Shared cabs", 2500, cost_factor, "Book shared cab rides between destinations"),
        ]
    elif per_person < 10000:
        recs = [
            _rec("Taxi/Private Cabs", 6000, cost_factor, "Convenient door-to-door travel with private cabs"),
            _rec("Economy Flight", 5000, cost_factor, "Economy class flights for longer distances"),
        ]
    else:
        recs = [
            _rec("Premium Cabs", 8000, cost_factor, "Luxury vehicles with experienced drivers"),
            _rec("Business Class Flights", 15000, cost_factor, "Comfortable business class travel for longer journeys"),
            _rec("Private Vehicle Rental", 12000, cost_factor, "Rent a private vehicle for the duration of your trip"),
        ]

    category = _first_category(destinations, catalog)
    if category == "mountain":
        recs.append(_rec("Mountain Special Transport", 4000, cost_factor,
                         "Special vehicles suitable for mountain terrain"))
    elif category == "beach":
        recs.append(_rec("Beach Town Transport", 3000, cost_factor,
                         "Local transport options ideal for beach destinations"))

    return recs[:3]


def accommodation_recommendations(
    accommodation_budget: float,
    days:                 int,
    persons:              int,
    cost_factor:          float,
    destinations:         List[str],
    catalog:              DestinationCatalog
) -> List[BudgetRecommendation]:
    per_night = accommodation_budget / (days * persons)

    if per_night < 1000:
        recs = [
            _rec("Budget Hostels", 800, cost_factor, "Clean, basic hostels with shared facilities"),
            _rec("Guest Houses", 950, cost_factor, "Local guest houses with basic amenities"),
        ]
    elif per_night < 3000:
        recs = [
            _rec("3-Star Hotels", 2500, cost_factor, "Comfortable rooms with standard amenities"),
            _rec("Boutique Stays", 2800, cost_factor, "Unique, locally-owned boutique accommodations"),
        ]
    else:
        recs = [
            _rec("5-Star Luxury Hotels", 8000, cost_factor, "Premium accommodations with excellent amenities"),
            _rec("Heritage Properties", 12000, cost_factor, "Stay in historic properties converted to luxury hotels"),
            _rec("Resort Villas", 15000, cost_factor, "Private villas with dedicated staff and services"),
        ]

    category = _first_category(destinations, catalog)
    if category == "beach":
        recs.append(_rec("Beachfront Resort", min(per_night * 1.2, 20000), cost_factor,
                         "Resort with direct beach access and sea views"))
    elif category == "mountain":
        recs.append(_rec("Mountain View Cottages", min(per_night * 1.1, 18000), cost_factor,
                         "Cozy cottages with panoramic mountain views"))
    elif category == "historical":
        recs.append(_rec("Heritage Stay", min(per_night * 1.3, 25000), cost_factor,
                         "Accommodations in restored historical buildings"))

    return recs[:3]


# (name, base cost, description) per food preference
FOOD_OPTIONS = {
    "budget": {
        "vegetarian": [
            ("Self-catering with local produce", 150, "Buy ingredients from local markets and prepare simple meals"),
            ("Budget vegetarian eateries", 180, "Affordable pure vegetarian food joints"),
        ],
        "non-vegetarian": [
            ("Budget non-veg eateries", 220, "Affordable meat and seafood options at local joints"),
            ("Mixed budget restaurants", 250, "Affordable restaurants with variety of options"),
        ],
        "no-preference": [
            ("Street food and local snacks", 150, "Affordable street food options throughout the day"),
            ("Budget dining options", 200, "Mix of affordable restaurants and food stalls"),
        ],
    },
    "regular": {
        "vegetarian": [
            ("Local vegetarian thalis", 200, "Authentic vegetarian thali meals at local restaurants"),
            ("South Indian vegetarian fare", 250, "Dosas, idlis, and other South Indian specialties"),
            ("North Indian vegetarian cuisine", 300, "Paneer dishes, rotis, and vegetable curries"),
        ],
        "non-vegetarian": [
            ("Local meat specialties", 350, "Regional non-vegetarian specialties"),
            ("Seafood options", 400, "Fresh seafood dishes where available"),
            ("Mixed cuisine restaurants", 450, "Restaurants offering both veg and non-veg options"),
        ],
        "no-preference": [
            ("Mixed local cuisine", 300, "A mix of vegetarian and non-vegetarian local options"),
            ("Street food experiences", 200, "Local street food from various vendors"),
            ("Restaurant dining", 400, "Sit-down meals at various restaurants"),
        ],
    },
    "premium": {
        "vegetarian": [
            ("Fine dining vegetarian restaurants", 800, "Upscale vegetarian dining experiences"),
            ("Vegetarian food tours", 600, "Guided vegetarian food tours with multiple tastings"),
        ],
        "non-vegetarian": [
            ("Signature non-veg restaurants", 1000, "Renowned restaurants specializing in meat dishes"),
            ("Seafood fine dining", 1200, "Premium seafood restaurants and experiences"),
        ],
        "no-preference": [
            ("Premium dining experiences", 1000, "Top-rated restaurants in each destination"),
            ("Chef's table experiences", 1500, "Exclusive dining with custom menus"),
        ],
    },
}


def food_recommendations(
    food_budget:        float,
    days:               int,
    persons:            int,
    cost_factor:        float,
    food_preference:    str = "no-preference",
    explore_local_food: bool = True
) -> List[BudgetRecommendation]:
    per_day = food_budget / (days * persons)

    if per_day < 500:
        options = FOOD_OPTIONS["budget"][food_preference]
    elif per_day < 1000:
        options = FOOD_OPTIONS["regular"][food_preference]
    else:
        # premium picks plus the first regular option
        options = FOOD_OPTIONS["premium"][food_preference] + FOOD_OPTIONS["regular"][food_preference][:1]

    recs = [_rec(name, cost, cost_factor, desc) for name, cost, desc in options]

    if explore_local_food:
        recs.append(_rec("Local cuisine exploration", 400, cost_factor,
                         "Special focus on regional delicacies and authentic local cuisine"))
        recs.append(_rec("Cooking class experience", 600, cost_factor,
                         "Learn to cook local dishes with expert chefs"))
    else:
        recs.append(_rec("Familiar cuisine restaurants", 500, cost_factor,
                         "Restaurants serving familiar international cuisine"))

    return recs[:4]


def miscellaneous_recommendations(
    misc_budget: float,
    persons:     int,
    cost_factor: float
) -> List[BudgetRecommendation]:
    per_person = misc_budget / persons
    recs = [_rec("Local SIM Card", 300, cost_factor, "Mobile connectivity with data for navigation and calls")]

    if per_person < 1000:
        recs.append(_rec("Souvenir Shopping", 500, cost_factor, "Budget for small souvenirs and mementos"))
    elif per_person < 3000:
        recs.append(_rec("Professional Photography", 2000, cost_factor,
                         "Hire a photographer for a day at select destinations"))
        recs.append(_rec("Shopping Budget", 1500, cost_factor, "Budget for local handicrafts and gifts"))
    else:
        recs.append(_rec("Luxury Shopping", 5000, cost_factor, "Shopping for high-quality local products and crafts"))
        recs.append(_rec("Wellness Services", 3000, cost_factor, "Spa treatments and wellness experiences"))

    return recs[:3]
