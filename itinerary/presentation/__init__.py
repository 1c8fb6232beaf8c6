"""Presentation-side state: the map view and the location-focus channel."""

from itinerary.presentation.focus import LocationFocusChannel
from itinerary.presentation.map_view import (
    MapView,
    MapViewState,
    collect_map_points,
    compute_bounds,
)

__all__ = [
    "LocationFocusChannel",
    "MapView",
    "MapViewState",
    "collect_map_points",
    "compute_bounds",
]
