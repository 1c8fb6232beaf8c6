"""
Travel plan generation.

Prompts the model for a prose itinerary, parses it into a TravelPlan and
enforces the budget. Failures propagate as GenerationError subclasses.
"""

from itinerary.generation.errors import (
    BudgetExceededError,
    GenerationError,
    UpstreamEmptyError,
    UpstreamFailureError,
)
from itinerary.generation.generation_api import generate_travel_plan

__all__ = [
    "BudgetExceededError",
    "GenerationError",
    "UpstreamEmptyError",
    "UpstreamFailureError",
    "generate_travel_plan",
]
