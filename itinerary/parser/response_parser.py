"""
Response parser for generated itineraries.

Turns the model's free-form, day-by-day prose into a TravelPlan. The
format requested in the prompt is only a suggestion, so parsing is a set
of independent extraction passes over each day's text, each with a
default when its pattern does not match. Nothing in here raises on
malformed text.
"""

import asyncio
import logging
from typing import List, Optional

from itinerary.geocoding.resolver import Geocoder
from itinerary.parser.activities import extract_activities
from itinerary.parser.config import ParserConfig, DEFAULT_CONFIG
from itinerary.parser.context import ParseContext
from itinerary.parser.meals import extract_meals
from itinerary.parser.segments import (
    clean_response_text,
    extract_stay_times,
    segment_days,
)
from itinerary.shared.contracts.travel_plan import TravelDay, TravelPlan, TripRequest


logger = logging.getLogger(__name__)


async def parse_day(day_text: str, day_number: int, context: ParseContext) -> TravelDay:
    """Parse one day segment into a TravelDay."""
    activities, meals = await asyncio.gather(
        extract_activities(day_text, context),
        extract_meals(day_text, context),
    )
    check_in, check_out = extract_stay_times(day_text)

    return TravelDay(
        day=day_number,
        activities=activities,
        meals=meals,
        check_in=check_in,
        check_out=check_out,
    )


async def parse_travel_plan(
    raw_text: str,
    request: TripRequest,
    geocoder: Geocoder,
    config: Optional[ParserConfig] = None,
) -> TravelPlan:
    """
    Parse a raw model response into a TravelPlan.

    Days are numbered by position, not by the number in the "Day N:"
    label, and may be fewer than requested if the response under-delivers.

    Args:
        raw_text: Model response text
        request: Trip parameters the plan echoes
        geocoder: Resolver for extracted addresses
        config: Optional parser configuration

    Returns:
        A new, immutable TravelPlan
    """
    context = ParseContext(
        destination=request.destination,
        number_of_travelers=request.number_of_travelers,
        geocoder=geocoder,
        config=config or DEFAULT_CONFIG,
    )

    segments = segment_days(clean_response_text(raw_text))
    if not segments:
        logger.warning("No day labels found in response | returning empty itinerary")

    days: List[TravelDay] = list(
        await asyncio.gather(
            *(parse_day(segment, i + 1, context) for i, segment in enumerate(segments))
        )
    )

    if len(days) != request.number_of_days:
        logger.info(
            f"Parsed day count differs from request | "
            f"parsed={len(days)}, requested={request.number_of_days}"
        )

    return TravelPlan.from_request(request, days)
