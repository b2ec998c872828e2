"""Tests for budget recommendations and restaurant picks."""

from services.catalog import default_catalog
from services.recommendations import (
    accommodation_recommendations,
    food_recommendations,
    miscellaneous_recommendations,
    travel_recommendations,
)
from services.restaurants import price_range, restaurant_recommendations


class TestTravel:
    def test_budget_tier_with_beach_extra(self) -> None:
        recs = travel_recommendations(8000, 2, 1.2, ["goa"], default_catalog())

        assert [r.name for r in recs] == ["Public Transport", "Shared cabs", "Beach Town Transport"]
        assert recs[0].cost == 1800

    def test_premium_tier_capped_at_three(self) -> None:
        recs = travel_recommendations(60000, 2, 1.0, ["ladakh"], default_catalog())

        assert [r.name for r in recs] == ["Premium Cabs", "Business Class Flights", "Private Vehicle Rental"]

    def test_mid_tier_mountain_extra(self) -> None:
        recs = travel_recommendations(14000, 2, 1.0, ["munnar"], default_catalog())

        assert recs[-1].name == "Mountain Special Transport"


class TestAccommodation:
    def test_mid_tier_heritage_extra(self) -> None:
        recs = accommodation_recommendations(20000, 5, 2, 1.0, ["jaipur"], default_catalog())

        # 2000 per person per night
        assert [r.name for r in recs] == ["3-Star Hotels", "Boutique Stays", "Heritage Stay"]
        assert recs[-1].cost == 2600

    def test_no_destinations(self) -> None:
        recs = accommodation_recommendations(5000, 5, 2, 1.0, [], default_catalog())

        assert [r.name for r in recs] == ["Budget Hostels", "Guest Houses"]


class TestFood:
    def test_budget_vegetarian_with_local_food(self) -> None:
        recs = food_recommendations(4000, 5, 2, 1.0, "vegetarian", True)

        assert [r.name for r in recs] == [
            "Self-catering with local produce",
            "Budget vegetarian eateries",
            "Local cuisine exploration",
            "Cooking class experience",
        ]

    def test_premium_without_local_food(self) -> None:
        recs = food_recommendations(50000, 5, 2, 1.5, "no-preference", False)

        assert [r.name for r in recs] == [
            "Premium dining experiences",
            "Chef's table experiences",
            "Mixed local cuisine",
            "Familiar cuisine restaurants",
        ]
        assert recs[0].cost == 1500

    def test_at_most_four(self) -> None:
        assert len(food_recommendations(8000, 2, 2, 1.0, "non-vegetarian", True)) == 4


def test_miscellaneous_tiers() -> None:
    assert [r.name for r in miscellaneous_recommendations(1000, 2, 1.0)] == [
        "Local SIM Card", "Souvenir Shopping",
    ]
    assert [r.name for r in miscellaneous_recommendations(4000, 2, 1.0)] == [
        "Local SIM Card", "Professional Photography", "Shopping Budget",
    ]
    assert [r.name for r in miscellaneous_recommendations(10000, 2, 1.0)] == [
        "Local SIM Card", "Luxury Shopping", "Wellness Services",
    ]


class TestRestaurants:
    def test_price_range(self) -> None:
        assert price_range(6000, 2) == "₹₹₹"
        assert price_range(1000, 1) == "₹₹"
        assert price_range(500, 1) == "₹"

    def test_beach_without_preference(self) -> None:
        recs = restaurant_recommendations(["goa"], "no-preference", 2000, 2, default_catalog())

        assert [r.name for r in recs] == ["Coconut Grove", "Ocean Spice", "India Flavors"]
        assert all(r.location == "Goa" for r in recs)
        assert all(r.price_range == "₹₹" for r in recs)

    def test_vegetarian_city(self) -> None:
        recs = restaurant_recommendations(["mumbai"], "vegetarian", 2000, 2, default_catalog())

        assert [r.name for r in recs] == ["Urban Flavors", "Street Food Market", "Green Leaf"]
        assert recs[0].special_dish == "Jackfruit Biryani"
        assert recs[0].is_vegetarian
        assert recs[1].price_range == "₹"

    def test_spiritual_is_always_vegetarian(self) -> None:
        recs = restaurant_recommendations(["varanasi"], "non-vegetarian", 2000, 2, default_catalog())

        assert recs[0].name == "Sattvic Bites"
        assert recs[0].is_vegetarian
        assert recs[1].name == "Spice & Grill"

    def test_capped_and_unknown_skipped(self) -> None:
        recs = restaurant_recommendations(
            ["atlantis", "goa", "mumbai", "jaipur"], "no-preference", 2000, 2, default_catalog()
        )

        assert len(recs) == 6
        assert recs[0].name == "Coconut Grove"
