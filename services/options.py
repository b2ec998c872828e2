# Option generators — synthetic flight, train, bus and hotel listings
# No live inventory: every option is drawn from the injected rng inside
# a price band chosen from the traveler's per-person travel budget.
# Lists are returned cheapest first.

import math
from typing import List, Optional
from models.schemas import Destination, FlightOption, HotelOption, TransportOption
from services.cost_service import round_half_up

AIRLINES = ["Air India", "IndiGo", "SpiceJet", "Vistara", "AirAsia India", "Go First", "Alliance Air"]

TRAIN_OPERATORS = [
    "Indian Railways", "Rajdhani Express", "Shatabdi Express",
    "Duronto Express", "Tejas Express", "Vande Bharat Express",
]

BUS_OPERATORS = ["KSRTC", "MSRTC", "APSRTC", "UPSRTC", "RSRTC", "Volvo", "Abhibus", "RedBus"]

HOTEL_CHAINS = [
    "Taj Hotels", "Oberoi Hotels", "ITC Hotels", "Leela Palaces",
    "Radisson", "Marriott", "Hyatt", "Novotel",
    "OYO Rooms", "Fabhotels", "Treebo",
]


def _randint(rng, low: int, high: int) -> int:
    """Integer in [low, high)."""
    return int(rng.integers(low, high))


def _pick(rng, options: List[str], start: int = 0, span: Optional[int] = None) -> str:
    span = span if span is not None else len(options) - start
    return options[start + _randint(rng, 0, span)]


def random_time(rng) -> str:
    return f"{_randint(rng, 0, 24):02d}:{_randint(rng, 0, 60):02d}"


def random_duration(rng, max_hours: int = 7) -> str:
    return f"{_randint(rng, 1, max_hours + 1)}h {_randint(rng, 0, 60)}m"


def _stops(rng, threshold: float, above: int, below: int) -> int:
    return above if float(rng.random()) > threshold else below


# ── Flights ───────────────────────────────────────────────────────────────────

def flight_options(
    travel_budget: float,
    from_location: str,
    to_location:   str,
    persons:       int,
    rng
) -> List[FlightOption]:
    """Round trip assumed: half the per-person travel budget per leg."""
    per_person = travel_budget / persons / 2

    def flight(airline: str, max_hours: int, cost: int, stops: int) -> FlightOption:
        return FlightOption(
            airline=airline,
            departure_time=random_time(rng),
            arrival_time=random_time(rng),
            duration=random_duration(rng, max_hours),
            cost=cost,
            stops=stops
        )

    if per_person <= 3000:
        options = [
            flight(_pick(rng, AIRLINES, 0, 3), 6, _randint(rng, 0, 1000) + 2000, _stops(rng, 0.3, 1, 2)),
            flight(_pick(rng, AIRLINES, 0, 3), 7, _randint(rng, 0, 800) + 1800, _stops(rng, 0.2, 1, 2)),
        ]
    elif per_person <= 7000:
        options = [
            flight(_pick(rng, AIRLINES), 5, _randint(rng, 0, 2000) + 4000, _stops(rng, 0.5, 0, 1)),
            flight(_pick(rng, AIRLINES, 0, 3), 6, _randint(rng, 0, 1500) + 2500, 1),
            flight(_pick(rng, AIRLINES, 2, 2), 4, _randint(rng, 0, 3000) + 6000, 0),
        ]
    else:
        options = [
            flight(_pick(rng, AIRLINES, 0, 2), 3, _randint(rng, 0, 5000) + 8000, 0),
            flight(_pick(rng, AIRLINES, 1, 3), 4, _randint(rng, 0, 2000) + 5000, _stops(rng, 0.7, 0, 1)),
            flight(_pick(rng, AIRLINES, 3, 2), 3, _randint(rng, 0, 6000) + 10000, 0),
        ]

    return sorted(options, key=lambda o: o.cost)


# ── Trains & buses ────────────────────────────────────────────────────────────

def train_options(
    travel_budget: float,
    from_location: str,
    to_location:   str,
    persons:       int,
    rng
) -> List[TransportOption]:
    per_person = travel_budget / persons / 3

    def train(operator: str, max_hours: int, cost: int, stops: int, travel_class: str) -> TransportOption:
        return TransportOption(
            operator=operator,
            departure_time=random_time(rng),
            arrival_time=random_time(rng),
            duration=random_duration(rng, max_hours),
            cost=cost,
            stops=stops,
            type="train",
            travel_class=travel_class
        )

    if per_person <= 1500:
        options = [
            train(_pick(rng, TRAIN_OPERATORS, 0, 3), 10, _randint(rng, 0, 500) + 800,
                  _stops(rng, 0.5, 2, 3), "Sleeper"),
            train(_pick(rng, TRAIN_OPERATORS, 0, 3), 12, _randint(rng, 0, 300) + 600,
                  _stops(rng, 0.3, 3, 4), "General"),
        ]
    elif per_person <= 3000:
        options = [
            train(_pick(rng, TRAIN_OPERATORS), 8, _randint(rng, 0, 800) + 1200,
                  _stops(rng, 0.6, 1, 2), "AC 3-Tier"),
            train(_pick(rng, TRAIN_OPERATORS), 7, _randint(rng, 0, 1000) + 1800,
                  _stops(rng, 0.7, 0, 1), "AC 2-Tier"),
        ]
    else:
        options = [
            train(_pick(rng, TRAIN_OPERATORS, 3, 3), 6, _randint(rng, 0, 1500) + 2500, 0, "AC 1st Class"),
            train(_pick(rng, TRAIN_OPERATORS, 3, 3), 5, _randint(rng, 0, 2000) + 3000, 0, "Executive Chair Car"),
        ]

    return sorted(options, key=lambda o: o.cost)


BUS_AMENITIES = ["Water Bottle", "Blanket", "Charging Point", "WiFi", "Entertainment System", "Snacks"]


def bus_options(
    travel_budget: float,
    from_location: str,
    to_location:   str,
    persons:       int,
    rng
) -> List[TransportOption]:
    per_person = travel_budget / persons / 4

    def bus(operator: str, max_hours: int, cost: int, stops: int, amenity_count: int) -> TransportOption:
        return TransportOption(
            operator=operator,
            departure_time=random_time(rng),
            arrival_time=random_time(rng),
            duration=random_duration(rng, max_hours),
            cost=cost,
            stops=stops,
            type="bus",
            amenities=BUS_AMENITIES[:amenity_count]
        )

    if per_person <= 1000:
        options = [
            bus(_pick(rng, BUS_OPERATORS, 0, 5), 12, _randint(rng, 0, 300) + 400, _stops(rng, 0.3, 3, 4), 1),
            bus(_pick(rng, BUS_OPERATORS, 0, 5), 10, _randint(rng, 0, 200) + 600, _stops(rng, 0.4, 2, 3), 2),
        ]
    elif per_person <= 2000:
        options = [
            bus(_pick(rng, BUS_OPERATORS), 9, _randint(rng, 0, 500) + 800, _stops(rng, 0.6, 1, 2), 3),
            bus(_pick(rng, BUS_OPERATORS), 8, _randint(rng, 0, 700) + 1000, _stops(rng, 0.7, 0, 1), 4),
        ]
    else:
        options = [
            bus(_pick(rng, BUS_OPERATORS, 5, 3), 7, _randint(rng, 0, 1000) + 1500, 0, 5),
            bus(_pick(rng, BUS_OPERATORS, 5, 3), 6, _randint(rng, 0, 1200) + 1800, 0, 6),
        ]

    return sorted(options, key=lambda o: o.cost)


# ── Hotels ────────────────────────────────────────────────────────────────────

def hotel_options(
    destination:          Destination,
    accommodation_budget: float,
    days:                 int,
    persons:              int,
    rng,
    max_options:          int = 3
) -> List[HotelOption]:
    """
    Budget / mid-range / luxury hotels for one destination.
    A tier is offered when the nightly per-room budget reaches its floor
    (1000 / 3000 / 6000); prices scale with the destination cost factor.
    Two persons per room.
    """
    per_night = (accommodation_budget * 0.4) / days
    per_room  = per_night / math.ceil(persons / 2)
    factor    = destination.cost_factor
    hotels    = []

    if per_room >= 1000:
        hotels.append(HotelOption(
            name=f"{destination.name} {_pick(rng, ['Inn', 'Lodge', 'Stays', 'Rooms'])}",
            chain=_pick(rng, HOTEL_CHAINS, 8, 3),
            price_per_night=round_half_up(_randint(rng, 0, 500) + 1000 * factor),
            rating=_randint(rng, 2, 4),
            amenities=["Free Wi-Fi", "Air Conditioning", "TV"],
            distance_from_attraction=f"{float(rng.random()) * 3 + 1:.1f} km",
            destination_id=destination.id
        ))

    if per_room >= 3000:
        hotels.append(HotelOption(
            name=f"{_pick(rng, ['Hotel', 'Suites', 'Residency'])} {destination.name}",
            chain=_pick(rng, HOTEL_CHAINS, 4, 4),
            price_per_night=round_half_up(_randint(rng, 0, 1000) + 3000 * factor),
            rating=_randint(rng, 3, 5),
            amenities=["Free Wi-Fi", "Air Conditioning", "Room Service", "Restaurant", "Swimming Pool"],
            distance_from_attraction=f"{float(rng.random()) + 0.5:.1f} km",
            destination_id=destination.id
        ))

    if per_room >= 6000:
        hotels.append(HotelOption(
            name=f"{_pick(rng, HOTEL_CHAINS, 0, 4)} {destination.name}",
            chain=_pick(rng, HOTEL_CHAINS, 0, 4),
            price_per_night=round_half_up(_randint(rng, 0, 4000) + 6000 * factor),
            rating=5,
            amenities=[
                "Free Wi-Fi", "Air Conditioning", "Room Service", "Multiple Restaurants",
                "Swimming Pool", "Spa", "Fitness Center", "Bar/Lounge", "Concierge Service"
            ],
            distance_from_attraction=f"{float(rng.random()) * 0.5 + 0.1:.1f} km",
            destination_id=destination.id
        ))

    hotels.sort(key=lambda h: h.price_per_night)
    return hotels[:max_options]
