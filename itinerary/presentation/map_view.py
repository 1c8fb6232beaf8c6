"""
Map view state.

Tracks what the map shows: markers for every resolved location in the
current plan, the bounds that fit them, and the centre/zoom after focus
events. Unresolved (0, 0) locations are never plotted.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from itinerary.presentation.focus import LocationFocusChannel
from itinerary.shared.contracts.travel_plan import GeoPoint, TravelPlan

# Centre of India, shown before any plan is loaded
DEFAULT_CENTER = GeoPoint(lat=20.5937, lng=78.9629)
DEFAULT_ZOOM = 5
FOCUS_ZOOM = 15


class MapMarker(BaseModel):
    """A plotted activity or meal."""

    day: int
    kind: str = Field(description="'activity' or 'meal'")
    label: str
    location: GeoPoint


class MapBounds(BaseModel):
    south: float
    west: float
    north: float
    east: float

    @property
    def center(self) -> GeoPoint:
        return GeoPoint(lat=(self.south + self.north) / 2, lng=(self.west + self.east) / 2)


class MapViewState(BaseModel):
    """Snapshot of the map for the API."""

    center: GeoPoint
    zoom: int
    markers: List[MapMarker] = Field(default_factory=list)
    bounds: Optional[MapBounds] = None


def collect_map_points(plan: TravelPlan) -> List[MapMarker]:
    """Markers for every resolved activity and meal location, in plan order."""
    markers = []
    for day in plan.days:
        for activity in day.activities:
            if activity.location.is_resolved:
                markers.append(
                    MapMarker(day=day.day, kind="activity", label=activity.name, location=activity.location)
                )
        for meal in day.meals:
            if meal.location.is_resolved:
                markers.append(
                    MapMarker(day=day.day, kind="meal", label=meal.restaurant, location=meal.location)
                )
    return markers


def compute_bounds(markers: List[MapMarker]) -> Optional[MapBounds]:
    if not markers:
        return None
    lats = [m.location.lat for m in markers]
    lngs = [m.location.lng for m in markers]
    return MapBounds(south=min(lats), west=min(lngs), north=max(lats), east=max(lngs))


class MapView:
    """Map-side consumer of focus events."""

    def __init__(self, channel: Optional[LocationFocusChannel] = None) -> None:
        self.center = DEFAULT_CENTER
        self.zoom = DEFAULT_ZOOM
        self.markers: List[MapMarker] = []
        self.bounds: Optional[MapBounds] = None
        self._unsubscribe = channel.subscribe(self.focus) if channel else None

    def focus(self, point: GeoPoint) -> None:
        if not point.is_resolved:
            return
        self.center = point
        self.zoom = FOCUS_ZOOM

    def fit_plan(self, plan: Optional[TravelPlan]) -> None:
        """Show a plan's markers, centred on their bounds."""
        self.markers = collect_map_points(plan) if plan is not None else []
        self.bounds = compute_bounds(self.markers)
        if self.bounds is not None:
            self.center = self.bounds.center

    def snapshot(self) -> MapViewState:
        return MapViewState(
            center=self.center,
            zoom=self.zoom,
            markers=list(self.markers),
            bounds=self.bounds,
        )

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
