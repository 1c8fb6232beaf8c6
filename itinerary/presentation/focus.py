"""
Location focus channel.

The plan display emits a point when the user asks to see an activity or
meal on the map; the map subscribes and recentres. The channel is passed
explicitly to both sides.
"""

import logging
from typing import Callable, List

from itinerary.shared.contracts.travel_plan import GeoPoint


logger = logging.getLogger(__name__)

FocusListener = Callable[[GeoPoint], None]


class LocationFocusChannel:
    """Subject carrying location-focus events."""

    def __init__(self) -> None:
        self._listeners: List[FocusListener] = []

    def subscribe(self, listener: FocusListener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, point: GeoPoint) -> bool:
        """
        Deliver a focus event to every listener.

        The (0, 0) sentinel is not a location and is dropped.

        Returns:
            True if the event was delivered
        """
        if not point.is_resolved:
            logger.debug("Ignoring focus request for unresolved location")
            return False
        for listener in list(self._listeners):
            listener(point)
        return True
