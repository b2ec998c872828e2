import os
from dotenv import load_dotenv

load_dotenv()

PERPLEXITY_API_KEY = os.getenv("PERPLEXITY_API_KEY")
LOG_LEVEL          = os.getenv("LOG_LEVEL", "INFO").upper()


def parse_seed(value):
    """Integer seed from an env string, None when unset or not an integer."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


# Fixed seed makes option lists and ranking jitter reproducible
RANDOM_SEED = parse_seed(os.getenv("PLANNER_RANDOM_SEED"))

# ── Affordability (INR per person per day at cost_factor 1.0) ───
BASELINE_DAILY_COST = 2000

AFFORDABILITY_THRESHOLDS = {
    "luxury":   0.8,   # ratio below this
    "moderate": 1.2,   # ratio below this, else "budget"
}

# ── Input validation ────────────────────────────────────────────
MIN_TOTAL_BUDGET = 5000

# ── Destination selection ───────────────────────────────────────
BUDGET_ORIENTED_THRESHOLD = 30000
POPULARITY_JITTER         = 0.3
LONG_TRIP_DAYS            = 10
MAX_DESTINATIONS          = 3

# (min total budget, destination cap), checked top-down
DESTINATION_CAP_TIERS = [
    (100000, 3),
    (50000,  2),
    (0,      1),
]

# ── Budget split by trip length ─────────────────────────────────
BUDGET_SPLITS = {
    "short": {
        "travel":        0.35,
        "accommodation": 0.30,
        "food":          0.20,
        "activities":    0.10,
        "miscellaneous": 0.05
    },
    "default": {
        "travel":        0.30,
        "accommodation": 0.35,
        "food":          0.20,
        "activities":    0.10,
        "miscellaneous": 0.05
    },
    "long": {
        "travel":        0.25,
        "accommodation": 0.40,
        "food":          0.20,
        "activities":    0.10,
        "miscellaneous": 0.05
    }
}

SHORT_TRIP_MAX_DAYS = 3
LONG_TRIP_MIN_DAYS  = 8
