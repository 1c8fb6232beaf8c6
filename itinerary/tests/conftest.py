"""
Shared fixtures for the itinerary tests.

Provides an in-memory geocoder and text generator so no test touches the
network.
"""

import asyncio
from typing import Dict, List, Optional

import pytest

from itinerary.shared.contracts.travel_plan import (
    GeoPoint,
    TripRequest,
    UNRESOLVED_LOCATION,
)


class FakeGeocoder:
    """
    Geocoder double.

    Known queries resolve to their mapped point, everything else to the
    sentinel. Optional per-query delays let tests scramble completion order.
    """

    def __init__(
        self,
        points: Optional[Dict[str, GeoPoint]] = None,
        delays: Optional[Dict[str, float]] = None,
    ):
        self.points = points or {}
        self.delays = delays or {}
        self.queries: List[str] = []

    async def geocode(self, query: str) -> GeoPoint:
        self.queries.append(query)
        await asyncio.sleep(self.delays.get(query, 0))
        return self.points.get(query, UNRESOLVED_LOCATION)


def make_text_generator(text: str):
    """Async text generator that always answers with text."""

    async def generate(prompt: str) -> str:
        generate.prompts.append(prompt)
        return text

    generate.prompts = []
    return generate


def make_trip_request(**overrides) -> TripRequest:
    fields = {
        "destination": "CityX",
        "budget": 100000,
        "interests": ["Culture", "Food"],
        "number_of_travelers": 2,
        "transportation": "own",
        "number_of_days": 1,
        "accommodation": "hotel",
        "description": "",
    }
    fields.update(overrides)
    return TripRequest(**fields)


SAMPLE_RESPONSE = (
    "Day 1: Check-in: 14:00\n"
    "Morning Activities:\n"
    "09:00 - 10:30 City Tour (Main Square, CityX) ₹800\n"
    "Meals:\n"
    "Breakfast: Cafe A (Main Square, CityX) ₹400"
)


@pytest.fixture
def geocoder():
    return FakeGeocoder(
        points={"Main Square, CityX, CityX": GeoPoint(lat=12.97, lng=77.59)}
    )


@pytest.fixture
def trip_request():
    return make_trip_request()
