"""
Itinerary planning package.

This package contains:
- shared/: Common infrastructure (LLM client, logging, contracts)
- geocoding/: Cached, retrying address resolver
- parser/: Prose itinerary -> structured TravelPlan
- generation/: Prompt, model call, parse and budget check as a graph
- store/: In-memory current/saved plans and their API
- presentation/: Map view state and location-focus channel
"""

from itinerary.generation.generation_api import generate_travel_plan
from itinerary.parser.response_parser import parse_travel_plan

__all__ = ["generate_travel_plan", "parse_travel_plan"]
