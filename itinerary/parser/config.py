"""
Parser configuration.

Holds the heuristic constants used when recovering structure from the
model's prose itinerary.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass
class ParserConfig:
    """
    Configuration for the itinerary parser.

    Attributes:
        per_person_cost_threshold: Activity costs at or below this are read
            as per-person and multiplied by the traveler count; larger
            figures are read as already totaled. Empirical, tune against
            real model output.
        default_meal_costs: Per-person cost used when a meal has no figure
        default_restaurant: Restaurant name used when a meal label is absent
        fallback_cuisine: Cuisine used when no vocabulary term matches
        cuisines: Cuisine vocabulary, in priority order
    """

    per_person_cost_threshold: int = 1000
    default_meal_costs: Dict[str, int] = field(
        default_factory=lambda: {"breakfast": 400, "lunch": 600, "dinner": 800}
    )
    default_restaurant: str = "Local Restaurant"
    fallback_cuisine: str = "Local"
    cuisines: Tuple[str, ...] = (
        "Indian",
        "Chinese",
        "Italian",
        "Continental",
        "Local",
        "South Indian",
        "North Indian",
        "Thai",
        "Japanese",
        "Mediterranean",
    )


# Default configuration instance
DEFAULT_CONFIG = ParserConfig()


def get_config(
    per_person_cost_threshold: Optional[int] = None,
    default_meal_costs: Optional[Dict[str, int]] = None,
    default_restaurant: Optional[str] = None,
) -> ParserConfig:
    """
    Create a configuration with optional overrides.

    Args:
        per_person_cost_threshold: Override for the per-person/total boundary
        default_meal_costs: Per-meal overrides, merged over the defaults
        default_restaurant: Override for the fallback restaurant name

    Returns:
        ParserConfig with specified overrides applied
    """
    return ParserConfig(
        per_person_cost_threshold=per_person_cost_threshold
        if per_person_cost_threshold is not None
        else DEFAULT_CONFIG.per_person_cost_threshold,
        default_meal_costs={
            **DEFAULT_CONFIG.default_meal_costs,
            **(default_meal_costs or {}),
        },
        default_restaurant=default_restaurant or DEFAULT_CONFIG.default_restaurant,
    )
