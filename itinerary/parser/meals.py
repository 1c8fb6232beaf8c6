"""
Meal extraction.

Looks for one "Breakfast:", "Lunch:" and "Dinner:" line per day, e.g.:

    Lunch: Laxmi Misthan Bhandar (Johari Bazaar, Jaipur) - North Indian ₹600

Every day always gets all three meals; missing labels fall back to
configured defaults.
"""

import asyncio
import re
from typing import List

from itinerary.geocoding.resolver import locate
from itinerary.parser.context import ParseContext
from itinerary.parser.costs import COST_PATTERN, classify_cuisine, scale_meal_cost
from itinerary.shared.contracts.travel_plan import MEAL_TYPES, Meal

_ADDRESS = re.compile(r"\(([^)]+)\)")

MEAL_PATTERNS = {
    meal_type: re.compile(rf"{meal_type}:[ \t]*(?P<info>[^\n]*)", re.IGNORECASE)
    for meal_type in MEAL_TYPES
}


async def extract_meal(day_text: str, meal_type: str, context: ParseContext) -> Meal:
    """Extract a single meal, keeping the first label match."""
    config = context.config
    info = ""
    cost = None

    match = MEAL_PATTERNS[meal_type].search(day_text)
    if match:
        line = match.group("info")
        cost_match = COST_PATTERN.search(line)
        if cost_match:
            info = line[: cost_match.start()].strip()
            cost = int(cost_match.group(1).replace(",", ""))
        else:
            info = line.strip()

    if not info:
        info = config.default_restaurant

    address_match = _ADDRESS.search(info)
    address = address_match.group(1).strip() if address_match else ""
    restaurant = " ".join(_ADDRESS.sub("", info, count=1).split()).rstrip(" -–,:")

    if cost is None:
        cost = config.default_meal_costs[meal_type]

    location = await locate(context.geocoder, address, context.destination)

    return Meal(
        type=meal_type,
        name=meal_type.capitalize(),
        restaurant=restaurant or config.default_restaurant,
        cuisine=classify_cuisine(info, config.cuisines, config.fallback_cuisine),
        cost=scale_meal_cost(cost, context.number_of_travelers),
        location=location,
        address=address,
    )


async def extract_meals(day_text: str, context: ParseContext) -> List[Meal]:
    """Extract breakfast, lunch and dinner concurrently, in that order."""
    meals = await asyncio.gather(
        *(extract_meal(day_text, meal_type, context) for meal_type in MEAL_TYPES)
    )
    return list(meals)
