"""
Prompt builders for itinerary generation.
"""

from itinerary.generation.prompts.templates import (
    ItineraryPromptConfig,
    ITINERARY_PROMPT_TEMPLATE,
)
from itinerary.shared.contracts.travel_plan import TripRequest


def build_itinerary_prompt(request: TripRequest) -> str:
    """
    Build the itinerary prompt for a trip request.

    Args:
        request: Validated trip request

    Returns:
        Complete prompt string
    """
    config = ItineraryPromptConfig(
        destination=request.destination,
        budget=request.budget,
        travelers=request.number_of_travelers,
        transportation=request.transportation,
        number_of_days=request.number_of_days,
        accommodation=request.accommodation,
        interests=list(request.interests),
        description=request.description,
    )
    return config.format_prompt(ITINERARY_PROMPT_TEMPLATE)
