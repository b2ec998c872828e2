# LLM Service — Perplexity API integration
# Turns a finished trip plan into a short, friendly narrative.
# Falls back to a templated summary when no key is configured or the call fails.

import json
import logging
from openai import OpenAI
from config import PERPLEXITY_API_KEY

logger = logging.getLogger(__name__)

client = OpenAI(
    api_key=PERPLEXITY_API_KEY,
    base_url="https://api.perplexity.ai"
) if PERPLEXITY_API_KEY else None

MODEL = "llama-3.1-sonar-small-128k-online"

SUMMARY_SYSTEM = """
You are a friendly India travel guide.
Given a trip plan with destinations, a budget breakdown in INR and a
day-by-day itinerary, write 3-4 engaging sentences.
Mention: the route, the highlight of each stop, the total budget, one practical travel tip.
Be warm and concise.
"""


def fallback_summary(plan: dict) -> str:
    names  = plan.get("destination_names") or plan.get("destinations") or []
    days   = plan.get("days")
    budget = plan.get("total_budget")

    if not names:
        return "Your trip plan is ready!"

    route = " → ".join(names)
    parts = [f"Your {days}-day trip covers {route}"]
    if budget is not None:
        parts.append(f"within a budget of ₹{budget:,}")
    return " ".join(parts) + ". Enjoy exploring India!"


def generate_summary(plan: dict) -> str:
    """Generate a human-friendly summary of the finalized trip plan."""
    if not client:
        return fallback_summary(plan)
    try:
        r = client.chat.completions.create(
            model=MODEL,
            messages=[
                {"role": "system", "content": SUMMARY_SYSTEM},
                {"role": "user",   "content": json.dumps(plan, default=str)}
            ],
            temperature=0.7
        )
        return r.choices[0].message.content.strip()
    except Exception as exc:
        logger.warning("Trip summary generation failed: %s", exc)
        return fallback_summary(plan)
