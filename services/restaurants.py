# Restaurant recommendations — per destination, by category and food preference

from typing import List
from models.schemas import RestaurantRecommendation
from services.catalog import DestinationCatalog

MAX_RESTAURANTS = 6

# category → (name, cuisine, rating, vegetarian dish, non-vegetarian dish)
CATEGORY_RESTAURANTS = {
    "mountain":   ("Mountain Hearth", "Himalayan", 4.5, "Siddu (Steamed Bread)", "Mutton Rara"),
    "historical": ("Royal Heritage", "Traditional Indian", 4.8, "Paneer Lababdar", "Laal Maas"),
    "city":       ("Urban Flavors", "Fusion", 4.4, "Jackfruit Biryani", "Butter Chicken Pasta"),
    "wildlife":   ("Wilderness Kitchen", "Regional", 4.4, "Wild Mushroom Curry", "Jungle Fowl Masala"),
}

# food preference → (name, cuisine, rating, is_vegetarian)
GENERAL_RESTAURANTS = {
    "vegetarian":     ("Green Leaf", "Pure Vegetarian", 4.3, True),
    "non-vegetarian": ("Spice & Grill", "North Indian", 4.4, False),
    "no-preference":  ("India Flavors", "Multi-cuisine", 4.5, False),
}


def price_range(food_budget: float, persons: int) -> str:
    per_person = food_budget / persons
    if per_person > 1000:
        return "₹₹₹"
    if per_person > 500:
        return "₹₹"
    return "₹"


def restaurant_recommendations(
    destination_ids: List[str],
    food_preference: str,
    food_budget:     float,
    persons:         int,
    catalog:         DestinationCatalog
) -> List[RestaurantRecommendation]:
    prices = price_range(food_budget, persons)
    veg    = food_preference == "vegetarian"
    recs   = []

    for dest_id in destination_ids:
        dest = catalog.by_id(dest_id)
        if not dest:
            continue

        def add(name, cuisine, rating, is_vegetarian, special_dish=None, price=prices):
            recs.append(RestaurantRecommendation(
                name=name,
                cuisine=cuisine,
                price_range=price,
                rating=rating,
                is_vegetarian=is_vegetarian,
                special_dish=special_dish,
                location=dest.name
            ))

        if dest.category == "beach":
            if food_preference in ("vegetarian", "no-preference"):
                add("Coconut Grove", "Coastal", 4.6, True, "Vegetable Coconut Curry")
            if food_preference in ("non-vegetarian", "no-preference"):
                add("Ocean Spice", "Seafood", 4.7, False, "Prawn Masala")
        elif dest.category == "spiritual":
            add("Sattvic Bites", "Sattvic", 4.3, True, "Sabudana Khichdi")
        else:
            name, cuisine, rating, veg_dish, non_veg_dish = CATEGORY_RESTAURANTS[dest.category]
            add(name, cuisine, rating, veg, veg_dish if veg else non_veg_dish)
            if dest.category == "city":
                add("Street Food Market", "Local Street Food", 4.2, True, price="₹")

        name, cuisine, rating, is_vegetarian = GENERAL_RESTAURANTS[food_preference]
        add(name, cuisine, rating, is_vegetarian)

    return recs[:MAX_RESTAURANTS]
