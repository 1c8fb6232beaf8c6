"""
Cost extraction, normalization and cuisine classification.

All amounts are whole rupees. The model is asked for group totals but
often writes per-person figures for cheap items, so activity costs are
disambiguated with a threshold and meal costs are always scaled.
"""

import re
from typing import Iterable, Optional

# Currency marker followed by an integer, thousands separators allowed.
COST_PATTERN = re.compile(r"(?:₹|\bRs\.?|\bINR)\s*(\d[\d,]*)")


def find_cost(text: str) -> Optional[int]:
    """Return the first currency-marked integer in text, or None."""
    match = COST_PATTERN.search(text)
    if not match:
        return None
    return int(match.group(1).replace(",", ""))


def strip_cost(text: str) -> str:
    """Remove the first currency amount from text."""
    return COST_PATTERN.sub("", text, count=1).strip()


def normalize_activity_cost(cost: int, travelers: int, threshold: int) -> int:
    """
    Scale an activity cost to the whole group.

    Figures at or below the threshold are treated as per-person; larger
    figures are assumed to be totals already. This is a heuristic and will
    misread cheap group totals and expensive per-person tickets.
    """
    if cost > threshold:
        return cost
    return cost * travelers


def scale_meal_cost(cost: int, travelers: int) -> int:
    """Meal figures are always per-person."""
    return cost * travelers


def classify_cuisine(text: str, vocabulary: Iterable[str], fallback: str = "Local") -> str:
    """
    Pick the first vocabulary term contained in text.

    Matching is a case-insensitive substring test in vocabulary order, so
    "South Indian" text reports "Indian" with the default vocabulary.
    """
    lowered = text.lower()
    for cuisine in vocabulary:
        if cuisine.lower() in lowered:
            return cuisine
    return fallback
