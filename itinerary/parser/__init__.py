"""
Itinerary parser.

Recovers a structured TravelPlan from the model's prose itinerary using
heuristic, best-effort extraction passes.
"""

from itinerary.parser.config import ParserConfig
from itinerary.parser.response_parser import parse_day, parse_travel_plan
from itinerary.parser.segments import clean_response_text, segment_days

__all__ = [
    "ParserConfig",
    "parse_day",
    "parse_travel_plan",
    "clean_response_text",
    "segment_days",
]
