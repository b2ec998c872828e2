# Affordability — classify a destination against a per-person daily budget
#   ratio = daily_budget / (BASELINE_DAILY_COST * cost_factor)
#   ratio < 0.8          → luxury   (over budget)
#   0.8 <= ratio < 1.2   → moderate (just within budget)
#   ratio >= 1.2         → budget   (comfortably within budget)

from config import BASELINE_DAILY_COST, AFFORDABILITY_THRESHOLDS
from models.schemas import Destination


def daily_budget_per_person(total_budget: float, days: int, persons: int) -> float:
    return total_budget / (days * persons)


def score_affordability(destination: Destination, daily_budget: float) -> str:
    ratio = daily_budget / (BASELINE_DAILY_COST * destination.cost_factor)

    if ratio < AFFORDABILITY_THRESHOLDS["luxury"]:
        return "luxury"
    if ratio < AFFORDABILITY_THRESHOLDS["moderate"]:
        return "moderate"
    return "budget"


def is_affordable(destination: Destination, daily_budget: float) -> bool:
    return score_affordability(destination, daily_budget) != "luxury"
