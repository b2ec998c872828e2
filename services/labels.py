# Itinerary labels — display strings for each itinerary day
# Activities by destination category, lodging by nightly budget tier,
# meals by food preference. Random picks come from the injected rng
# so a seeded generator reproduces the same itinerary text.

from typing import List
from services.catalog import DestinationCatalog

CATEGORY_ACTIVITIES = {
    "beach": (
        ["Visit the beach", "Try water sports", "Relax by the shore"],
        ["Boat excursion", "Visit nearby islands", "Beachside meditation session"],
    ),
    "mountain": (
        ["Hiking expedition", "Mountain viewpoint visit", "Nature photography"],
        ["Visit local villages", "Mountain biking", "Wildlife spotting"],
    ),
    "city": (
        ["City tour", "Visit main attractions", "Shopping at local markets"],
        ["Museum visit", "Cultural show", "Visit historical sites"],
    ),
    "wildlife": (
        ["Safari", "Bird watching", "Visit wildlife sanctuary"],
        ["Nature trail", "Visit conservation center", "Wildlife photography"],
    ),
    "historical": (
        ["Visit main historical sites", "Guided history tour", "Visit museums"],
        ["Visit off-beat historical locations", "Cultural workshop", "Local history exploration"],
    ),
    "spiritual": (
        ["Temple/Shrine visit", "Meditation session", "Spiritual discourse"],
        ["Yoga class", "Visit sacred sites", "Participate in local rituals"],
    ),
}

GENERIC_ACTIVITIES = [
    "Take photos of the beautiful scenery",
    "Meet with local residents",
    "Shop for souvenirs",
    "Enjoy the local atmosphere",
]

ACCOMMODATION_TIERS = {
    "low":    ["Budget-friendly guesthouse", "Hostel dormitory", "Homestay with locals", "Budget hotel"],
    "medium": ["Mid-range hotel", "Tourist class accommodation", "Serviced apartment", "Boutique guesthouse"],
    "high":   ["Luxury resort", "Premium hotel suite", "Boutique heritage hotel", "High-end serviced villa"],
}

ACCOMMODATION_FLAVOR = {
    "beach":      "{stay} with sea views in {name}",
    "mountain":   "{stay} with mountain views in {name}",
    "city":       "Centrally located {stay} in {name}",
    "wildlife":   "{stay} near the wildlife sanctuary in {name}",
    "historical": "{stay} in the historical district of {name}",
    "spiritual":  "{stay} near spiritual sites in {name}",
}

VEGETARIAN_DISHES = [
    "Vegetarian thali with seasonal vegetables",
    "Paneer butter masala with naan",
    "Masala dosa with coconut chutney",
    "Vegetable biryani with raita",
    "Palak paneer with steamed rice",
]

NON_VEGETARIAN_DISHES = [
    "Butter chicken with garlic naan",
    "Mutton biryani with raita",
    "Fish curry with steamed rice",
    "Chicken tikka with mint chutney",
    "Rogan josh with saffron rice",
]

STANDARD_MEALS = [
    "Continental breakfast at the hotel",
    "Lunch at a recommended restaurant",
    "Dinner at the accommodation restaurant",
]

LOCAL_FOOD_MEALS = [
    "Breakfast with local specialties",
    "Street food tasting for lunch",
    "Authentic regional cuisine dinner experience",
]


def _pick(rng, options: List[str]) -> str:
    return options[int(rng.integers(0, len(options)))]


def accommodation_tier(budget_per_night: float) -> str:
    if budget_per_night < 1000:
        return "low"
    if budget_per_night > 5000:
        return "high"
    return "medium"


class ItineraryLabels:
    """Default activity / accommodation / meal label generator."""

    def __init__(self, catalog: DestinationCatalog, rng):
        self.catalog = catalog
        self.rng     = rng

    def activities(self, destination_id: str, day_index: int) -> List[str]:
        dest = self.catalog.by_id(destination_id)
        if not dest:
            return ["Explore the local area"]

        first_day, later_days = CATEGORY_ACTIVITIES[dest.category]
        planned = first_day if day_index == 1 else later_days

        # 1-2 generic extras, drawn without replacement
        pool   = list(GENERIC_ACTIVITIES)
        extras = []
        for _ in range(int(self.rng.integers(1, 3))):
            extras.append(pool.pop(int(self.rng.integers(0, len(pool)))))

        return list(planned) + extras

    def accommodation(self, destination_id: str, budget_per_night: float) -> str:
        dest = self.catalog.by_id(destination_id)
        if not dest:
            return "Standard hotel accommodation"

        stay = _pick(self.rng, ACCOMMODATION_TIERS[accommodation_tier(budget_per_night)])
        return ACCOMMODATION_FLAVOR[dest.category].format(stay=stay, name=dest.name)

    def meals(self, food_preference: str = "no-preference", explore_local_food: bool = True) -> List[str]:
        meals = list(LOCAL_FOOD_MEALS if explore_local_food else STANDARD_MEALS)

        if food_preference == "vegetarian":
            dishes = VEGETARIAN_DISHES
        elif food_preference == "non-vegetarian":
            dishes = NON_VEGETARIAN_DISHES
        else:
            dishes = VEGETARIAN_DISHES + NON_VEGETARIAN_DISHES

        meals[2] = f"{meals[2]} ({_pick(self.rng, dishes)})"
        return meals
