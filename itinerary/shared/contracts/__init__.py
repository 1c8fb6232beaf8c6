"""Data contracts shared across the generation pipeline."""

from itinerary.shared.contracts.travel_plan import (
    INTEREST_OPTIONS,
    MEAL_TYPES,
    UNRESOLVED_LOCATION,
    Activity,
    CostSummary,
    GeoPoint,
    Meal,
    TravelDay,
    TravelPlan,
    TripRequest,
)

__all__ = [
    "INTEREST_OPTIONS",
    "MEAL_TYPES",
    "UNRESOLVED_LOCATION",
    "Activity",
    "CostSummary",
    "GeoPoint",
    "Meal",
    "TravelDay",
    "TravelPlan",
    "TripRequest",
]
