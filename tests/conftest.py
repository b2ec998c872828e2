"""Shared pytest fixtures for all test suites."""

from datetime import date

import pytest

from models.schemas import Destination, TripParams
from services.catalog import DestinationCatalog


class FixedRandom:
    """Random source stub replaying a fixed sequence.

    random() cycles through ``values``; integers(low, high) always returns low.
    """

    def __init__(self, values=(0.0,)):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value

    def integers(self, low: int, high: int) -> int:
        return low


class RecordingLabels:
    """Label generator stub that records what the itinerary builder asks for."""

    def __init__(self):
        self.activity_calls = []

    def activities(self, destination_id: str, day_index: int) -> list[str]:
        self.activity_calls.append((destination_id, day_index))
        return [f"{destination_id}-day-{day_index}"]

    def accommodation(self, destination_id: str, budget_per_night: float) -> str:
        return f"stay-{destination_id}"

    def meals(self, food_preference: str = "no-preference", explore_local_food: bool = True) -> list[str]:
        return ["breakfast", "lunch", "dinner"]


def make_destination(
    dest_id: str,
    region: str,
    cost_factor: float,
    popularity: int,
    category: str = "city",
) -> Destination:
    """Helper to create a test destination."""
    return Destination(
        id=dest_id,
        name=dest_id.capitalize(),
        region=region,
        category=category,
        cost_factor=cost_factor,
        popularity=popularity,
    )


@pytest.fixture
def small_catalog() -> DestinationCatalog:
    """Four destinations over three regions; Alpha and Bravo share a region."""
    return DestinationCatalog([
        make_destination("alpha", "North", 1.0, 9, "beach"),
        make_destination("bravo", "North", 0.8, 8, "mountain"),
        make_destination("charlie", "South", 1.2, 7, "city"),
        make_destination("delta", "East", 0.9, 6, "historical"),
    ])


@pytest.fixture
def fixed_random() -> FixedRandom:
    return FixedRandom()


@pytest.fixture
def make_random():
    """Factory for FixedRandom stubs with a chosen sequence."""
    return lambda *values: FixedRandom(values or (0.0,))


@pytest.fixture
def make_dest():
    return make_destination


@pytest.fixture
def recording_labels() -> RecordingLabels:
    return RecordingLabels()


@pytest.fixture
def make_params():
    """Factory for TripParams with sensible defaults."""

    def _make(**overrides) -> TripParams:
        fields = {
            "total_budget": 50000,
            "days": 5,
            "persons": 2,
            "start_date": date(2026, 12, 1),
            "starting_location": "Delhi",
            "destination_preferences": [],
            "food_preference": "no-preference",
            "explore_local_food": True,
            "transport_mode": "any",
        }
        fields.update(overrides)
        return TripParams(**fields)

    return _make
